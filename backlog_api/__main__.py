"""Entry point for ``python -m backlog_api``: serve the API with uvicorn."""

import uvicorn

from backlog_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "backlog_api.main:create_app",
        factory=True,
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
