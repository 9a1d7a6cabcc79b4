#!/usr/bin/env python3
"""
Start the store API with uvicorn.

Reads HOST/PORT/LOG_LEVEL from the same settings the application uses and
trusts X-Forwarded-* headers so webhook URLs keep the public https scheme
behind the hosting proxy.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import uvicorn

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.api.main import create_app
from src.utils.config_loader import ConfigurationError, load_settings


def main() -> int:
    try:
        settings = load_settings()
    except ConfigurationError as e:
        logging.basicConfig(level=logging.ERROR)
        logging.getLogger("run_server").error("Refusing to start: %s", e)
        return 1

    app = create_app(settings)
    logging.getLogger("run_server").info("Server listening on port %d", settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        proxy_headers=True,
        forwarded_allow_ips="*",
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
