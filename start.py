"""Simple launcher for the map routing API.

Starts the uvicorn server on the host and port from MAP_SERVER_* settings.
"""

from __future__ import annotations

from map_routing.api.app import main


if __name__ == "__main__":
    main()
