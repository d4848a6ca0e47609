"""Run the StaffHub API with uvicorn.

Usage:
    python -m staffhub
    staffhub-api
"""

import uvicorn

from staffhub_config.settings import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "staffhub.presentation.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_debug,
        log_config=None,  # Logging is configured by create_app
    )


if __name__ == "__main__":
    main()
