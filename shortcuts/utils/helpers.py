"""
Helper utilities for the search-shortcuts server.

Provides:
- Settings loading (TOML file, then environment overrides)
- Logging setup (loguru, with uvicorn's loggers routed through it)
- Bind address and TLS option parsing
"""

import copy
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import toml
from loguru import logger

from shortcuts.errors import ConfigError

DEFAULT_SETTINGS = {
    "server": {
        "bind_addr": "127.0.0.1:8080",
        "tls_key_file": "",
        "tls_cert_file": "",
    },
    "logging": {
        "level": "INFO",
    },
}

# Environment variable → (section, key)
ENV_OVERRIDES = {
    "BIND_ADDR": ("server", "bind_addr"),
    "TLS_KEY_FILE": ("server", "tls_key_file"),
    "TLS_CERT_FILE": ("server", "tls_cert_file"),
    "LOG_LEVEL": ("logging", "level"),
}


def default_settings_path() -> Path:
    """SHORTCUTS_SETTINGS if set, else data/settings.toml inside the package."""
    override = os.environ.get("SHORTCUTS_SETTINGS")
    if override:
        return Path(override)
    return Path(__file__).parent.parent / "data" / "settings.toml"


def load_settings(
    settings_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Dict[str, Any]:
    """
    Load server settings.

    Defaults are overridden by the TOML file, which is overridden by
    environment variables (BIND_ADDR, TLS_KEY_FILE, TLS_CERT_FILE, LOG_LEVEL).

    Args:
        settings_path: TOML file to read (default: default_settings_path())
        environ: Environment mapping (default: os.environ)

    Returns:
        Dictionary containing settings with defaults applied

    Example settings structure:
        {
            "server": {
                "bind_addr": "0.0.0.0:8443",
                "tls_key_file": "/etc/ssl/private/key.pem",
                "tls_cert_file": "/etc/ssl/certs/cert.pem"
            },
            "logging": {
                "level": "INFO"
            }
        }
    """
    if settings_path is None:
        settings_path = default_settings_path()
    if environ is None:
        environ = os.environ

    settings = copy.deepcopy(DEFAULT_SETTINGS)

    if settings_path.exists():
        try:
            settings = _deep_merge(settings, toml.load(settings_path))
        except (toml.TomlDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {settings_path}: {e}")
            logger.warning("Using default settings")
    else:
        logger.info(f"Settings file not found at {settings_path}, using defaults")

    overrides: Dict[str, Dict[str, str]] = {}
    for var, (section, key) in ENV_OVERRIDES.items():
        if var in environ:
            overrides.setdefault(section, {})[key] = environ[var]

    return _deep_merge(settings, overrides)


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary with defaults
        override: Dictionary with overrides

    Returns:
        Merged dictionary (override takes precedence)
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def parse_bind_addr(bind_addr: str) -> tuple[str, int]:
    """
    Split "host:port" (or "[v6]:port") into host and port.

    Raises:
        ConfigError: missing host or port, or port out of range
    """
    host, sep, port = bind_addr.strip().rpartition(":")
    if not sep or not host:
        raise ConfigError(f"bind_addr must look like host:port, got {bind_addr!r}")

    host = host.strip("[]")
    try:
        port_number = int(port)
    except ValueError:
        raise ConfigError(f"bind_addr has an invalid port: {bind_addr!r}") from None
    if not 0 <= port_number <= 65535:
        raise ConfigError(f"bind_addr port out of range: {bind_addr!r}")

    return host, port_number


def tls_options(server_settings: Dict[str, Any]) -> Dict[str, str]:
    """
    Uvicorn TLS keyword arguments for the [server] section.

    Both files or neither must be given.
    """
    key_file = server_settings.get("tls_key_file") or ""
    cert_file = server_settings.get("tls_cert_file") or ""

    if bool(key_file) != bool(cert_file):
        raise ConfigError("tls_key_file and tls_cert_file must be set together")
    if not key_file:
        return {}
    return {"ssl_keyfile": key_file, "ssl_certfile": cert_file}


class InterceptHandler(logging.Handler):
    """Forward stdlib logging records (uvicorn, starlette) to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find the caller outside the logging module so loguru reports it
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(level: str = "INFO") -> None:
    """
    Configure loguru as the only log sink.

    Replaces loguru's default handler with a stderr sink at the given
    level and sends uvicorn's loggers through it.
    """
    logger.remove()
    logger.add(sys.stderr, level=level.upper())

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        std_logger = logging.getLogger(name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.propagate = False
