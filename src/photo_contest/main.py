"""Command line entrypoint that serves the API with uvicorn."""

import uvicorn

from photo_contest.api.app import create_app
from photo_contest.config import Settings
from photo_contest.containers import build_container


def main() -> None:
    """Run the photo contest API server."""
    settings = Settings()
    app = create_app(build_container(settings))
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
