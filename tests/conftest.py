"""Shared pytest fixtures for all tests."""

import pytest

from config import Config
from services.base import Services
from storage.manager import StorageManager


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration pointing to a temporary data directory.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "spendbook",
        data_dir=tmp_path / "spendbook" / "data",
        data_filename="expenses.json",
        log_level="DEBUG",
        log_dir=tmp_path / "spendbook" / "logs",
        currency_suffix="Ft",
        decimal_places=0,
    )


@pytest.fixture
def storage_manager(test_config):
    """Create a StorageManager for the temporary data directory."""
    return StorageManager(test_config)


@pytest.fixture
def services(test_config, storage_manager):
    """Create a Services container with an empty ledger.

    Args:
        test_config: Test configuration fixture.
        storage_manager: Storage manager fixture.

    Returns:
        Services: Services container for testing.
    """
    return Services(test_config, storage_manager=storage_manager)
