"""Typer application and CLI entry point for hevy-bridge.

This module wires together the root Typer application and registers one
sub-application per API resource (``config``, ``user``, ``workouts``,
``routines``, ``exercises``, ``folders``, ``history``).

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. It installs a SIGINT handler and invokes the Typer app.
Unhandled exceptions are written to a crash log under the data directory.

See Also:
    :mod:`hevy_bridge.config`: API key resolution.
    :mod:`hevy_bridge.output`: Output formatting initialised in :func:`main_callback`.
"""

from __future__ import annotations

import signal
import sys
import traceback
from datetime import datetime
from typing import Any, Optional

import typer

from hevy_bridge import __version__
from hevy_bridge.commands.config import config_app
from hevy_bridge.commands.exercises import exercises_app
from hevy_bridge.commands.folders import folders_app
from hevy_bridge.commands.history import history_app
from hevy_bridge.commands.routines import routines_app
from hevy_bridge.commands.user import user_app
from hevy_bridge.commands.workouts import workouts_app
from hevy_bridge.exit_codes import EXIT_CODES_HELP, EXIT_GENERIC_FAILURE

_EPILOG = (
    "Authentication: all API commands require a Hevy API key (Hevy Pro), "
    "available at https://hevy.com/settings?developer. The key is resolved "
    "in this order: --api-key, the HEVY_API_KEY environment variable, then "
    "the key stored by `hevy-bridge config set-key`.\n\n"
    "Output: data commands print JSON to stdout; status and errors go to "
    "stderr. List commands take --page and --page-size; check page_count "
    "in the response to know when to stop. Dates use ISO 8601, e.g. "
    "2024-01-15T00:00:00Z.\n\n"
    f"{EXIT_CODES_HELP}"
)

app = typer.Typer(
    name="hevy-bridge",
    help="CLI client for the Hevy workout tracking API (https://api.hevyapp.com/docs).",
    epilog=_EPILOG,
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

app.add_typer(config_app, name="config", help="Manage the stored API key.")
app.add_typer(user_app, name="user", help="Retrieve authenticated user information.")
app.add_typer(
    workouts_app,
    name="workouts",
    help="List, view, create, update workouts and query workout events.",
)
app.add_typer(routines_app, name="routines", help="List, view, create, update routines.")
app.add_typer(
    exercises_app,
    name="exercises",
    help="List, view, and create exercise templates.",
)
app.add_typer(folders_app, name="folders", help="List, view, and create routine folders.")
app.add_typer(
    history_app,
    name="history",
    help="View exercise history (set-level data across workouts).",
)


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"hevy-bridge {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    api_key: Optional[str] = typer.Option(
        None,
        "--api-key",
        help="Hevy API key (overrides HEVY_API_KEY and the stored config).",
        show_default=False,
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", "-n", help="Print the request instead of sending it."
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output."
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress status messages on stderr."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output on stderr."
    ),
) -> None:
    """Root callback executed before every sub-command.

    Installs the global :class:`~hevy_bridge.output.OutputManager` and
    stores shared options in ``ctx.obj`` for the sub-commands.
    """
    from hevy_bridge.output import OutputManager, set_output

    set_output(OutputManager(no_color=no_color, quiet=quiet, verbose=verbose))

    ctx.ensure_object(dict)
    ctx.obj["api_key"] = api_key
    ctx.obj["dry_run"] = dry_run


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)

    signal.signal(signal.SIGINT, _handler)


def _write_crash_log(exc: Exception) -> str:
    """Write the current traceback to disk and return the log file path."""
    from hevy_bridge.config import get_data_dir

    logs_dir = get_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    log_path = logs_dir / f"crash-{timestamp}.log"
    log_path.write_text(f"{exc!r}\n\n{traceback.format_exc()}")
    return str(log_path)


def main() -> None:
    """CLI entry point invoked by the ``hevy-bridge`` console script.

    Commands already turn :class:`~hevy_bridge.exceptions.HevyBridgeError`
    into ``typer.Exit``; anything that still escapes is reported here.
    Other exceptions produce a crash log and a generic failure exit.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception as exc:
        from hevy_bridge.exceptions import HevyBridgeError
        from hevy_bridge.output import error

        if isinstance(exc, HevyBridgeError):
            error(str(exc))
            sys.exit(exc.exit_code)
        else:
            log_path = _write_crash_log(exc)
            error(f"Unexpected error. Debug log: {log_path}")
            sys.exit(EXIT_GENERIC_FAILURE)
