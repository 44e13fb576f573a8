"""Decode API description documents and detect their flavour."""

import json
from typing import Any

import yaml


def decode_document(text: str) -> Any:
    """Parse document text as JSON, falling back to YAML.

    Raises ValueError when the text is neither.
    """
    try:
        return json.loads(text)
    except (json.JSONDecodeError, ValueError):
        pass

    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"document is neither JSON nor YAML: {e}") from e


def detect_format(document: Any) -> str:
    """Detect the flavour of a parsed document.

    Returns: 'openapi', 'swagger', or 'unknown'.
    """
    if isinstance(document, dict):
        if "openapi" in document:
            return "openapi"
        if "swagger" in document:
            return "swagger"
    return "unknown"
