"""Model registry view and naming rules."""

from ollama_rename.models.naming import (
    NOISE_MARKERS,
    is_valid_model_name,
    suggest_name,
    validate_model_name,
)
from ollama_rename.models.registry import (
    ModelRecord,
    exists,
    is_running,
    list_models,
    loaded_models,
    sort_for_selection,
)

__all__ = [
    "NOISE_MARKERS",
    "ModelRecord",
    "exists",
    "is_running",
    "is_valid_model_name",
    "list_models",
    "loaded_models",
    "sort_for_selection",
    "suggest_name",
    "validate_model_name",
]
