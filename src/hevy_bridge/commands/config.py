"""Config commands -- persist and inspect the API key.

Provides the ``hevy-bridge config`` sub-command group. None of these
commands need an API key or touch the network.
"""

from __future__ import annotations

import os

import typer

from hevy_bridge.output import error, format_response, print_data, success, warning


config_app = typer.Typer(no_args_is_help=True)


@config_app.command("set-key")
def config_set_key(
    key: str = typer.Argument(help="The Hevy API key to store."),
) -> None:
    """Save your API key to the config file.

    The file is created (with its directory) if needed and any previous
    key is overwritten. Get a key at https://hevy.com/settings?developer
    (Hevy Pro required).

    Example: hevy-bridge config set-key abc123-def456-...
    """
    from hevy_bridge.config import API_KEY_ENV_VAR, save_api_key
    from hevy_bridge.exceptions import HevyBridgeError

    try:
        path = save_api_key(key)
    except HevyBridgeError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None
    success(f"API key saved to {path}")
    if os.environ.get(API_KEY_ENV_VAR):
        warning(f"{API_KEY_ENV_VAR} is set and takes precedence over the stored key.")


@config_app.command("path")
def config_path() -> None:
    """Print the path to the config file.

    Example: hevy-bridge config path
    """
    from hevy_bridge.config import get_config_path

    print_data(str(get_config_path()))


@config_app.command("show")
def config_show(ctx: typer.Context) -> None:
    """Show which API key source is in effect.

    Prints JSON with the config file path, the winning source
    (flag, env, or file; null when none is set) and the key with all but
    its first four characters masked.

    Example: hevy-bridge config show
    """
    from hevy_bridge.config import get_config_path, mask_secret, resolve_api_key
    from hevy_bridge.exceptions import ConfigError, MissingCredentialError

    root_obj = ctx.find_root().obj or {}
    try:
        credential = resolve_api_key(root_obj.get("api_key"))
    except MissingCredentialError:
        credential = None
    except ConfigError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    format_response(
        {
            "config_path": str(get_config_path()),
            "source": credential.source.value if credential else None,
            "api_key": mask_secret(credential.value) if credential else None,
        }
    )
