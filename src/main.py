"""Entrypoint: `python -m src.main` (or the `canastra-server` script)."""

import uvicorn

from src.api.app import create_app
from src.core.config import Settings
from src.core.logging_config import configure_logging


def main() -> None:
    settings = Settings.from_env()
    configure_logging(settings)
    app = create_app(settings)
    # log_config=None: uvicorn's loggers propagate to the handler installed above
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
