# Search Shortcuts Utilities Package
"""
Shared utility functions for the search-shortcuts server.
"""

from .helpers import load_settings, parse_bind_addr, setup_logging, tls_options

__all__ = ["load_settings", "parse_bind_addr", "setup_logging", "tls_options"]
