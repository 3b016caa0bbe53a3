"""Model name grammar and destination name suggestions."""

import re

from ollama_rename.errors import InvalidNameError

# Slash-separated non-empty segments with an optional non-empty :tag.
MODEL_NAME_RE = re.compile(
    r"^(?:[A-Za-z0-9._-]+/)*[A-Za-z0-9._-]+(?::[A-Za-z0-9._-]+)?$"
)

# Quantization and format suffixes commonly found in imported model names.
NOISE_MARKERS = (
    "-GGUF",
    "-gguf",
    ".gguf",
    "-Q2",
    "-Q3",
    "-Q4",
    "-Q5",
    "-Q6",
    "-Q8",
    "-K",
    "_K",
    "-KM",
    "_KM",
    "-K_M",
    "_K_M",
    "-Q4_K",
    "_Q4_K",
    "-Q5_K",
    "_Q5_K",
)


def suggest_name(full_name: str) -> str:
    """Derive a short destination name from a model identifier.

    Drops the tag and any namespace or host prefix, then truncates at each
    noise marker found, in NOISE_MARKERS order.

    Example:
        >>> suggest_name("hf.co/org/Name-GGUF:Q4_K_M")
        'Name'
    """
    base = full_name.split(":", 1)[0]
    name = base.split("/")[-1]
    for marker in NOISE_MARKERS:
        pos = name.find(marker)
        if pos != -1:
            name = name[:pos]
    return name


def validate_model_name(name: str) -> None:
    """Check a model name against the naming grammar.

    Args:
        name: Candidate name, already trimmed.

    Raises:
        InvalidNameError: If the name does not match.
    """
    if not MODEL_NAME_RE.match(name):
        raise InvalidNameError(name)


def is_valid_model_name(name: str) -> bool:
    return MODEL_NAME_RE.match(name) is not None
