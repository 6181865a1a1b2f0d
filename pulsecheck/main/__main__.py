"""
Main module entry point.

Serves the API with uvicorn: python -m pulsecheck.main
"""

import uvicorn

from .config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "pulsecheck.main.app:app",
        host=settings.service.host,
        port=settings.service.port,
        reload=settings.service.reload,
    )


if __name__ == "__main__":
    main()
