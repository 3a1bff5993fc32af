"""Resource sub-commands for hevy-bridge.

Each module exports one :class:`typer.Typer` sub-application registered on
the root app in :mod:`hevy_bridge.app`:

* :mod:`~hevy_bridge.commands.config` -- persist and inspect the API key.
* :mod:`~hevy_bridge.commands.user` -- authenticated user info.
* :mod:`~hevy_bridge.commands.workouts` -- workouts and workout events.
* :mod:`~hevy_bridge.commands.routines` -- routines (workout templates).
* :mod:`~hevy_bridge.commands.exercises` -- exercise templates.
* :mod:`~hevy_bridge.commands.folders` -- routine folders.
* :mod:`~hevy_bridge.commands.history` -- per-exercise set history.

:mod:`~hevy_bridge.commands.common` holds the request runner they share.
"""
