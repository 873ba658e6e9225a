"""Main entry point for the GroupMe-Discord bridge."""

from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from bridge import Application, BridgeConfig
from bridge.api import create_fastapi_app
from bridge.logging_config import setup_logging


def main():
    """Run the bridge."""
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env")

    config = BridgeConfig.from_env()
    setup_logging(config.log_level)

    app = create_fastapi_app(Application(config))

    uvicorn.run(
        app,
        host=config.api_host,
        port=config.api_port,
        log_level=config.log_level.lower(),
        log_config=None,
    )


if __name__ == "__main__":
    main()
