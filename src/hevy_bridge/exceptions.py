"""Exception hierarchy for hevy-bridge.

All exceptions inherit from :class:`HevyBridgeError`, which carries an
``exit_code`` attribute mapped to a constant from
:mod:`hevy_bridge.exit_codes`. Commands catch ``HevyBridgeError``, print
the message to stderr and exit with that code. None of them are retried.

Subclass hierarchy::

    HevyBridgeError              (exit 1)
    +-- InvalidUsageError        (exit 2)
    |   +-- RequestBodyError     (exit 2)
    +-- ConfigError              (exit 3)
    |   +-- MissingCredentialError (exit 3)
    +-- TransportError           (exit 4)
    +-- RemoteError              (exit 5)
    +-- ResponseFormatError      (exit 6)
"""

from __future__ import annotations

from typing import Optional

from hevy_bridge.exit_codes import (
    EXIT_CONFIG_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_REMOTE_ERROR,
    EXIT_RESPONSE_FORMAT_ERROR,
    EXIT_TRANSPORT_ERROR,
)


class HevyBridgeError(Exception):
    """Base exception for all hevy-bridge errors.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(HevyBridgeError):
    """Raised for invalid CLI arguments that Click itself cannot catch."""

    exit_code = EXIT_INVALID_USAGE


class RequestBodyError(InvalidUsageError):
    """Raised when the ``--json`` payload is not valid JSON."""


class ConfigError(HevyBridgeError):
    """Raised for a missing API key or an unreadable/unwritable config file."""

    exit_code = EXIT_CONFIG_ERROR


class MissingCredentialError(ConfigError):
    """Raised when neither the flag, the environment, nor the config file supplies a key."""


class TransportError(HevyBridgeError):
    """Raised on network-level failures (DNS, connection refused, TLS, timeout)."""

    exit_code = EXIT_TRANSPORT_ERROR


class RemoteError(HevyBridgeError):
    """Raised when the API returns a non-2xx status.

    The server's body is kept verbatim in :attr:`body` and repeated in the
    message so that it reaches stderr unchanged.
    """

    exit_code = EXIT_REMOTE_ERROR

    def __init__(self, status_code: int, body: str, reason: Optional[str] = None):
        prefix = f"HTTP {status_code}"
        if reason:
            prefix = f"{prefix} {reason}"
        super().__init__(f"{prefix}: {body}" if body else prefix)
        self.status_code = status_code
        self.body = body


class ResponseFormatError(HevyBridgeError):
    """Raised when a 2xx response body cannot be decoded as JSON."""

    exit_code = EXIT_RESPONSE_FORMAT_ERROR
