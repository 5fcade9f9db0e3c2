"""Pytest configuration and fixtures for integration tests.

Loads .env from the project root and skips the whole directory when
GEMINI_API_KEY is not available.
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv


def pytest_configure(config):
    """Load environment variables from .env before collection."""
    env_path = Path(__file__).parent.parent.parent / ".env"
    load_dotenv(env_path)


@pytest.fixture(scope="session", autouse=True)
def check_api_key():
    """Skip live tests if GEMINI_API_KEY is not configured in the environment or .env."""
    if not os.getenv("GEMINI_API_KEY"):
        pytest.skip(
            "Integration tests skipped. Missing API key: GEMINI_API_KEY. Please set it in your .env file.",
            allow_module_level=True,
        )
