"""API key resolution and the persisted config file.

This module handles all persistent state for hevy-bridge, which is a
single JSON file holding the API key:

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.hevy-bridge/`` on macOS and Windows. See :func:`get_config_dir`
  and :func:`get_data_dir`.
* **Persisted key** -- :func:`save_api_key` writes ``{"api_key": ...}``
  and :func:`load_persisted_config` reads it back.
* **Precedence resolution** -- :func:`resolve_api_key` picks exactly one
  source: the ``--api-key`` flag, then ``HEVY_API_KEY``, then the file.

File writes use an atomic temp-file-then-rename strategy
(:func:`_atomic_write`). Concurrent writers are not coordinated; the last
rename wins.
"""

from __future__ import annotations

import json
import os
import platform
import tempfile
from pathlib import Path
from typing import Mapping, Optional

from pydantic import ValidationError

from hevy_bridge.exceptions import ConfigError, InvalidUsageError, MissingCredentialError
from hevy_bridge.models import CredentialSource, PersistedConfig, ResolvedCredential

_APP_NAME = "hevy-bridge"
_CONFIG_FILENAME = "config.json"

API_KEY_ENV_VAR = "HEVY_API_KEY"
BASE_URL_ENV_VAR = "HEVY_BASE_URL"
DEFAULT_BASE_URL = "https://api.hevyapp.com/v1"

MISSING_KEY_MESSAGE = (
    "No API key provided. Supply one via: "
    "1. --api-key <KEY>, "
    f"2. the {API_KEY_ENV_VAR} environment variable, or "
    f"3. `{_APP_NAME} config set-key <KEY>` to persist it."
)


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform follows the XDG Base Directory layout (Linux/BSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def _fallback_base_dir() -> Path:
    """Fallback base directory for non-XDG platforms (macOS, Windows)."""
    return Path.home() / f".{_APP_NAME}"


def _xdg_base(env_var: str, default_segments: tuple[str, ...]) -> Path:
    """Resolve an XDG base directory from an env var with fallback segments under $HOME."""
    env_value = os.environ.get(env_var, "")
    if env_value:
        return Path(env_value)
    base = Path.home()
    for seg in default_segments:
        base = base / seg
    return base


def get_config_dir() -> Path:
    """Return the configuration directory.

    On Linux/BSD: ``$XDG_CONFIG_HOME/hevy-bridge/`` (default
    ``~/.config/hevy-bridge/``). On macOS/Windows: ``~/.hevy-bridge/``.

    The directory is not created here; only :func:`save_api_key` writes.
    """
    if _is_xdg_platform():
        return _xdg_base("XDG_CONFIG_HOME", (".config",)) / _APP_NAME
    return _fallback_base_dir()


def get_config_path() -> Path:
    """Path to the persisted ``config.json``."""
    return get_config_dir() / _CONFIG_FILENAME


def get_data_dir() -> Path:
    """Return the data directory (crash logs), creating it if necessary.

    On Linux/BSD: ``$XDG_DATA_HOME/hevy-bridge/`` (default
    ``~/.local/share/hevy-bridge/``). On macOS/Windows: ``~/.hevy-bridge/logs/``.
    """
    if _is_xdg_platform():
        path = _xdg_base("XDG_DATA_HOME", (".local", "share")) / _APP_NAME
    else:
        path = _fallback_base_dir() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- Atomic file writes ---


def _atomic_write(path: Path, data: str) -> None:
    """Write data to file atomically using temp file + rename.

    The temporary file is created in the same directory as *path* so that
    ``os.replace`` is an atomic rename on POSIX systems. The file is
    restricted to the owner (``0o600``) since it holds a secret.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    fd = None
    tmp_path: Optional[str] = None
    try:
        fd = tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        )
        tmp_path = fd.name
        fd.write(data)
        fd.flush()
        os.fsync(fd.fileno())
        fd.close()
        fd = None  # prevent double-close below
        os.chmod(tmp_path, 0o600)
        os.replace(tmp_path, path)
    except BaseException:
        if fd is not None:
            fd.close()
        if tmp_path is not None:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
        raise


# --- Persisted config ---


def load_persisted_config(path: Optional[Path] = None) -> Optional[PersistedConfig]:
    """Load the persisted config file.

    Args:
        path: Override for the config file location (defaults to
            :func:`get_config_path`).

    Returns:
        The deserialised :class:`~hevy_bridge.models.PersistedConfig`, or
        ``None`` if the file does not exist.

    Raises:
        ConfigError: If the file exists but cannot be read, is not valid
            JSON, or is not a JSON object.
    """
    path = path or get_config_path()
    if not path.is_file():
        return None
    try:
        text = path.read_text(encoding="utf-8")
        data = json.loads(text)
        return PersistedConfig.model_validate(data)
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except (json.JSONDecodeError, ValidationError) as exc:
        raise ConfigError(f"Invalid config file at {path}: {exc}") from exc


def save_api_key(key: str, path: Optional[Path] = None) -> Path:
    """Persist *key* to the config file, overwriting any previous content.

    Args:
        key: The Hevy API key to store, exactly as given.
        path: Override for the config file location.

    Returns:
        The path that was written.

    Raises:
        InvalidUsageError: If *key* is empty or only whitespace.
        ConfigError: If the directory or file cannot be written.
    """
    if not key.strip():
        raise InvalidUsageError("API key must not be empty")

    path = path or get_config_path()
    data = PersistedConfig(api_key=key).model_dump(mode="json")
    try:
        _atomic_write(path, json.dumps(data, indent=2) + "\n")
    except OSError as exc:
        raise ConfigError(f"Failed to write config file {path}: {exc}") from exc
    return path


# --- Precedence resolution ---


def resolve_api_key(
    flag: Optional[str],
    environ: Optional[Mapping[str, str]] = None,
    path: Optional[Path] = None,
) -> ResolvedCredential:
    """Resolve the API key from exactly one source.

    Precedence (high to low):
        1. ``--api-key`` flag
        2. ``HEVY_API_KEY`` environment variable
        3. Persisted config file

    Empty values count as absent. Sources are never merged: the first
    non-empty one wins and the rest are not consulted, so the config file
    is only read when neither the flag nor the variable is set.

    Args:
        flag: Value of the ``--api-key`` option, if given.
        environ: Environment mapping (defaults to ``os.environ``).
        path: Override for the config file location.

    Raises:
        MissingCredentialError: If no source yields a key.
        ConfigError: If the config file is unreadable.
    """
    if flag:
        return ResolvedCredential(value=flag, source=CredentialSource.FLAG)

    environ = os.environ if environ is None else environ
    env_value = environ.get(API_KEY_ENV_VAR, "")
    if env_value:
        return ResolvedCredential(value=env_value, source=CredentialSource.ENV)

    stored = load_persisted_config(path)
    if stored is not None and stored.api_key:
        return ResolvedCredential(value=stored.api_key, source=CredentialSource.FILE)

    raise MissingCredentialError(MISSING_KEY_MESSAGE)


def resolve_base_url(environ: Optional[Mapping[str, str]] = None) -> str:
    """Return the API base URL, honouring the ``HEVY_BASE_URL`` override."""
    environ = os.environ if environ is None else environ
    return (environ.get(BASE_URL_ENV_VAR) or DEFAULT_BASE_URL).rstrip("/")


def mask_secret(value: str) -> str:
    """Mask all but the first four characters of a secret for display."""
    if len(value) <= 4:
        return "*" * len(value)
    return value[:4] + "*" * (len(value) - 4)
