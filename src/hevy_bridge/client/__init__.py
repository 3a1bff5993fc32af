"""HTTP client module for hevy-bridge.

:class:`SyncClient` wraps :class:`httpx.Client` with API-key injection,
dry-run mode, and the mapping of HTTP outcomes onto the exception
hierarchy in :mod:`hevy_bridge.exceptions`. There are no retries: each
call to :meth:`SyncClient.execute` sends exactly one request.

Example::

    from hevy_bridge.client import SyncClient
    from hevy_bridge.endpoints import list_workouts

    with SyncClient(api_key) as client:
        data = client.execute(list_workouts(page=1, page_size=5))
"""

from hevy_bridge.client.sync_client import SyncClient

__all__ = ["SyncClient"]
