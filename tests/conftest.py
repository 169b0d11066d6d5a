"""Shared test fixtures.

Loads .env then .env.test (overriding) and forces the in-memory backend so
no test reaches a real database.
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path, override=True)

os.environ["REPOSITORY_BACKEND"] = "inmemory"


@pytest.fixture(autouse=True)
def reset_repository_singletons():
    """Drop cached repositories around each test."""
    from infrastructure.persistence.factory import reset_repositories

    reset_repositories()
    yield
    reset_repositories()
