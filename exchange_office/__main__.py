"""Run the API with uvicorn: ``python -m exchange_office``."""

import uvicorn

from exchange_office.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "exchange_office.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
