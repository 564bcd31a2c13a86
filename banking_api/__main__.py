"""Run the API with ``python -m banking_api``."""

import uvicorn

from banking_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "banking_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_config=None,
    )


if __name__ == "__main__":
    main()
