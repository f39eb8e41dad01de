"""Run the service: python -m restaurant_api (or the restaurant-api script)."""

import uvicorn

from restaurant_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "restaurant_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
