"""FastAPI application entry point."""

import uvicorn
from ddtrace import patch_all

from application import create_app
from config import load_config

patch_all()

config = load_config()
app = create_app(config)


def main():
    """Serves the application on the configured port."""
    uvicorn.run(app, host="0.0.0.0", port=config.server.port, log_config=None)


if __name__ == "__main__":
    main()
