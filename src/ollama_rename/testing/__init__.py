"""Shared test utilities, fixtures, and factories."""

from ollama_rename.testing.factories import make_model_record, make_tags_payload
from ollama_rename.testing.fixtures import (
    FakeDaemon,
    create_fake_client,
    create_mock_fallback,
)

__all__ = [
    "FakeDaemon",
    "create_fake_client",
    "create_mock_fallback",
    "make_model_record",
    "make_tags_payload",
]
