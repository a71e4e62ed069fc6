"""Server entry point — `python -m app` or the `dogs-api` console script.

Invariants:
    - Port chosen by Settings.listen_port (test mode listens on the alternate port)
"""

import uvicorn

from app.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.listen_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
