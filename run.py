"""
Start the user service with uvicorn.

Host and port come from the ``HOST`` and ``PORT`` environment variables
(defaults ``127.0.0.1`` and ``8000``).

Usage:
    python run.py
"""

import uvicorn

from app.core.config import settings


def main() -> None:
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        # app.core.logging_config owns the handlers
        log_config=None,
    )


if __name__ == "__main__":
    main()
