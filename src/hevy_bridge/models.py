"""Pydantic models shared across hevy-bridge.

**Persisted state** -- :class:`PersistedConfig` is the JSON record stored
at ``<config_dir>/config.json``.

**Per-invocation values** -- :class:`ResolvedCredential` records which
source supplied the API key, and :class:`ApiRequest` describes the single
HTTP request a command performs.
"""

from __future__ import annotations

import enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class PersistedConfig(BaseModel):
    """On-disk configuration written by ``hevy-bridge config set-key``.

    Unknown keys are tolerated so that a hand-edited file still loads.
    """

    model_config = ConfigDict(extra="allow")

    api_key: Optional[str] = Field(default=None, description="Hevy API key")


class CredentialSource(str, enum.Enum):
    """Where the effective API key came from."""

    FLAG = "flag"
    ENV = "env"
    FILE = "file"


class ResolvedCredential(BaseModel):
    """An API key together with the single source it was read from."""

    value: str
    source: CredentialSource


class HTTPMethod(str, enum.Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"


class ApiRequest(BaseModel):
    """One request against the Hevy API.

    Example::

        ApiRequest(method=HTTPMethod.GET, path="/workouts",
                   params={"page": 1, "pageSize": 5})
    """

    method: HTTPMethod = HTTPMethod.GET
    path: str = Field(description="Path relative to the API base URL, e.g. /workouts")
    params: dict[str, Any] = Field(default_factory=dict, description="Query parameters")
    json_body: Optional[Any] = Field(default=None, description="Decoded JSON request body")

    @property
    def has_body(self) -> bool:
        """POST and PUT always carry ``json_body``, even when it is JSON ``null``."""
        return self.method in (HTTPMethod.POST, HTTPMethod.PUT)

    def describe(self) -> str:
        """Short ``METHOD /path`` label used in diagnostics."""
        return f"{self.method.value} {self.path}"
