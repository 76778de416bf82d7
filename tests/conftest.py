"""Root pytest configuration for test discovery and auto-skip behavior.

All tests stay visible to the test explorer; tests that need Docker are
auto-skipped unless explicitly enabled.

Test Structure:
    tests/
    ├── masterdom/             # Marketplace tests
    │   ├── unit/              # Fast, isolated tests (mocked repositories)
    │   ├── persistence/       # Repositories and read adapters on SQLite
    │   ├── api/               # HTTP endpoints through TestClient on SQLite
    │   ├── cli/               # Typer commands
    │   └── integration/       # Tests with Testcontainers PostgreSQL
    ├── masterdom_auth/        # Password hashing and JWT primitives
    ├── masterdom_config/      # Settings loading
    └── shared/                # Shared fixtures and utilities

Environment Variables:
    RUN_INTEGRATION=1    Run @pytest.mark.integration tests
    RUN_ALL_TESTS=1      Run all tests (overrides other settings)

Pytest Options:
    --run-integration    Run integration tests
    --run-all            Run all tests
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")
elif (CONFIG_DIR / ".env").exists():
    load_dotenv(CONFIG_DIR / ".env")

# The API module builds an app on import, which needs the required secrets
os.environ.setdefault("JWT_SECRET_KEY", "test-jwt-secret-for-testing-only")
os.environ.setdefault("POSTGRES_PASSWORD", "test-password")
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite+aiosqlite:///:memory:")

from masterdom_config.settings import clear_settings_cache  # noqa: E402

_TRUTHY = ("1", "true", "yes")


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.integration",
    )
    parser.addoption(
        "--run-all",
        action="store_true",
        default=False,
        help="Run all tests regardless of markers",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests against a PostgreSQL container (auto-skipped)",
    )
    config.addinivalue_line(
        "markers",
        "slow: Tests that take more than 1 second",
    )


def pytest_collection_modifyitems(config, items):
    """Auto-skip integration tests unless explicitly enabled."""
    run_all = config.getoption("--run-all") or (
        os.environ.get("RUN_ALL_TESTS", "").lower() in _TRUTHY
    )
    if run_all:
        return

    run_integration = config.getoption("--run-integration") or (
        os.environ.get("RUN_INTEGRATION", "").lower() in _TRUTHY
    )

    skip_integration = pytest.mark.skip(
        reason="Integration test - run with --run-integration or RUN_INTEGRATION=1",
    )

    for item in items:
        item_markers = {mark.name for mark in item.iter_markers()}
        if not run_integration and "integration" in item_markers:
            item.add_marker(skip_integration)


@pytest.fixture(autouse=True)
def configure_app_settings():
    """Start every test from freshly loaded settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()
