"""pytest configuration and fixtures for kollama tests."""

import os

import pytest
from PyQt6.QtWidgets import QApplication

# Allow running headless (no display server) unless a platform is chosen.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture(autouse=True)
def reset_host_state():
    """Clear the host config and the default logger's override around each test."""
    from kollama.protocols import set_plasmoid_config
    from kollama.services import debug_log_set_test_config, get_default_logger

    set_plasmoid_config(None)
    debug_log_set_test_config(None)
    get_default_logger().last_call = None
    yield
    set_plasmoid_config(None)
    debug_log_set_test_config(None)
