# This project was developed with assistance from AI tools.
"""Run the API with uvicorn: ``python -m mortgage_api``."""

import uvicorn

from .core.config import settings


def main() -> None:
    uvicorn.run(
        "mortgage_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    main()
