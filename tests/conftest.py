"""
Shared pytest fixtures for device registry tests.
"""
import os
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from device_registry.application.services.device_service import DeviceService
from device_registry.domain.repositories.device_repository import DeviceRepository
from device_registry.infrastructure.memory.in_memory_device_repository import InMemoryDeviceRepository


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_device_registry",
        "DEVICE_STORE": "memory",
        "LOG_LEVEL": "DEBUG",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.mongo_server_selection_timeout_ms = 100
    mock.device_store = "memory"
    mock.log_level = "INFO"
    mock.cors_origins = ["http://localhost:3000"]

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("device_registry.core.config.get_settings", return_value=mock), patch(
        "device_registry.main.get_settings", return_value=mock
    ), patch("device_registry.api.health_controller.get_settings", return_value=mock), patch(
        "device_registry.di.providers.database_provider.get_settings", return_value=mock
    ), patch("device_registry.di.providers.repository_provider.get_settings", return_value=mock):
        yield mock


@pytest.fixture
def memory_repo() -> InMemoryDeviceRepository:
    return InMemoryDeviceRepository()


@pytest.fixture
def device_service(memory_repo) -> DeviceService:
    return DeviceService(memory_repo)


@pytest.fixture
def mock_device_repo():
    """Recording stub for DeviceRepository with async methods."""
    return AsyncMock(spec=DeviceRepository)
