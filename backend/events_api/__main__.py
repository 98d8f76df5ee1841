"""Run the Events API under uvicorn.

Usage:
    python -m events_api

Host and port come from settings (HOST / PORT, default 0.0.0.0:3001).
"""

from uvicorn import Config, Server

from events_api.config import get_settings


def main() -> None:
    settings = get_settings()
    config = Config(
        app="events_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    Server(config).run()


if __name__ == "__main__":
    main()
