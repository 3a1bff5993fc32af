"""hevy-bridge -- a command-line client for the Hevy workout tracking API.

Every data command performs exactly one authenticated HTTP request against
``https://api.hevyapp.com/v1`` and prints the JSON response to stdout, so
the output can be piped straight into ``jq`` or another script.

Typical workflow::

    hevy-bridge config set-key YOUR_API_KEY
    hevy-bridge workouts list --page 1 --page-size 5

Modules:
    app: Typer application and console-script entry point.
    config: API key resolution and the persisted config file.
    client: httpx wrapper that maps HTTP outcomes to exceptions.
    endpoints: Translation of commands into API requests.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric process exit codes.
    output: stdout/stderr formatting.
"""

__version__ = "0.1.0"
