"""
Search Shortcuts - Server entry point

Loads settings, configures logging and serves the redirecting search
endpoint with uvicorn (HTTPS when a key and certificate are configured).

Usage:
  search-shortcuts
  BIND_ADDR=0.0.0.0:8443 TLS_KEY_FILE=key.pem TLS_CERT_FILE=cert.pem search-shortcuts
"""

import sys

import uvicorn
from loguru import logger

from shortcuts.errors import ConfigError
from shortcuts.server import create_app
from shortcuts.utils.helpers import load_settings, parse_bind_addr, setup_logging, tls_options


def main() -> int:
    settings = load_settings()
    setup_logging(settings["logging"]["level"])

    try:
        host, port = parse_bind_addr(settings["server"]["bind_addr"])
        tls = tls_options(settings["server"])
    except ConfigError as e:
        logger.error(f"Invalid settings: {e}")
        return 1

    scheme = "https" if tls else "http"
    logger.info(f"Serving search shortcuts on {scheme}://{host}:{port}")

    uvicorn.run(create_app(), host=host, port=port, log_config=None, **tls)
    return 0


if __name__ == "__main__":
    sys.exit(main())
