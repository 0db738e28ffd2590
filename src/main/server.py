"""
Server Entry Point - Main Layer

Runs the FastAPI application with uvicorn using the GE settings.
"""

import uvicorn

from src.main.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "src.main.app:app",
        host=settings.ge.host,
        port=settings.ge.port,
        reload=settings.ge.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
