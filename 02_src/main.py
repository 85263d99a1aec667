"""Main entry point for the Messenger relay."""

import sys

import uvicorn
from dotenv import load_dotenv

from relay.api import create_fastapi_app
from relay.app import Application
from relay.config import ENV_FILE, load_settings
from relay.errors import ConfigError
from relay.logging_config import get_logger, setup_logging
from sim import Sim

logger = get_logger(__name__)


def main():
    """Run the application."""
    load_dotenv(ENV_FILE)
    setup_logging()

    try:
        settings = load_settings()
    except ConfigError as e:
        logger.critical("%s", e)
        sys.exit(1)

    # SIM posts to this server
    api_url = f"http://localhost:{settings.port}"
    from relay.api.routes import control
    control.set_sim_instance(Sim(app_secret=settings.app_secret, api_url=api_url))

    app = create_fastapi_app(Application(settings))

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
