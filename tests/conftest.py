"""
Shared test fixtures for the search-shortcuts test suite.

Provides a fresh default router and real settings files written to a
temporary directory (no mocking of the filesystem).
"""

import pytest
import toml

from shortcuts.search.registry import default_router


@pytest.fixture
def router():
    """The process-wide router, exactly as the server uses it."""
    return default_router()


@pytest.fixture
def tmp_settings(tmp_path):
    """Create a real settings TOML file with all sections."""
    settings_path = tmp_path / "settings.toml"
    data = {
        "server": {
            "bind_addr": "0.0.0.0:8443",
            "tls_key_file": "/etc/ssl/private/shortcuts.key",
            "tls_cert_file": "/etc/ssl/certs/shortcuts.pem",
        },
        "logging": {"level": "DEBUG"},
    }
    settings_path.write_text(toml.dumps(data))
    return settings_path
