"""Shared test configuration and fixtures."""

from unittest.mock import MagicMock

import pytest

from ollama_rename.daemon.client import OllamaClient
from ollama_rename.daemon.operations import ModelOperations
from ollama_rename.testing import FakeDaemon, create_fake_client, create_mock_fallback


@pytest.fixture
def daemon() -> FakeDaemon:
    """Provide a fake daemon with two installed models."""
    return FakeDaemon(models=["qwen3-coder:latest", "hf.co/org/Name-GGUF:Q4_K_M"])


@pytest.fixture
def client(daemon: FakeDaemon) -> OllamaClient:
    """Provide a client talking to the fake daemon."""
    with create_fake_client(daemon) as c:
        yield c


@pytest.fixture
def fallback() -> MagicMock:
    """Provide a mock native binary wrapper."""
    return create_mock_fallback()


@pytest.fixture
def operations(client: OllamaClient) -> ModelOperations:
    """Provide copy/delete operations with the CLI fallback disabled."""
    return ModelOperations(client, None, MagicMock())
