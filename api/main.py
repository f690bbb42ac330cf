"""
Server entrypoint.

Usage:
    python3 -m api.main
    uvicorn api.main:app --port 3000
"""

from __future__ import annotations

import uvicorn

from api.app import create_app, setup_logging
from api.dependencies import get_config

config = get_config()
setup_logging(config.log_level)
app = create_app(config)


def main():
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
