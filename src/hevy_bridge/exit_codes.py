"""Numeric process exit codes.

Each constant maps to one error category and is referenced by the
corresponding :class:`~hevy_bridge.exceptions.HevyBridgeError` subclass.
Shell wrappers can inspect ``$?`` to tell failure classes apart without
parsing stderr.

Example::

    $ hevy-bridge workouts get does-not-exist
    Error: HTTP 404 Not Found: {"error":"not found"}
    $ echo $?
    5   # EXIT_REMOTE_ERROR
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unexpected error occurred."""

EXIT_INVALID_USAGE = 2
"""Invalid arguments, a missing required parameter, or a malformed ``--json`` body."""

EXIT_CONFIG_ERROR = 3
"""No API key could be resolved, or the config file is unreadable or unwritable."""

EXIT_TRANSPORT_ERROR = 4
"""A network-level error occurred (DNS failure, connection refused, TLS, timeout)."""

EXIT_REMOTE_ERROR = 5
"""The API answered with a non-2xx HTTP status."""

EXIT_RESPONSE_FORMAT_ERROR = 6
"""The API answered 2xx but the body was not valid JSON."""

EXIT_CODES_HELP = (
    "Exit codes: 0 success, 1 unexpected failure, 2 usage error or invalid --json, "
    "3 configuration error, 4 transport error, 5 remote API error, "
    "6 malformed response body."
)
"""One-paragraph summary rendered in the root ``--help`` epilog."""
