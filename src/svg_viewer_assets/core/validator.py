"""JSON Schema validation for viewer manifests.

This module loads the bundled JSON Schema and validates manifests before output.
"""

import json
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema import ValidationError

from .types import ViewerItem

# Path to the schema file shipped inside the package
# src/svg_viewer_assets/core/validator.py -> src/svg_viewer_assets/schemas/
SCHEMA_PATH = Path(__file__).parent.parent / "schemas" / "viewer-manifest.schema.json"


def load_schema() -> dict[str, Any]:
    """Load the JSON schema from disk.

    Returns:
        Dictionary containing the JSON Schema.

    Raises:
        FileNotFoundError: If schema file doesn't exist
        json.JSONDecodeError: If schema is invalid JSON
    """
    if not SCHEMA_PATH.exists():
        raise FileNotFoundError(f"Schema file not found: {SCHEMA_PATH}")

    with SCHEMA_PATH.open("r", encoding="utf-8") as f:
        return json.load(f)  # type: ignore[no-any-return]


def validate_manifest(items: list[ViewerItem]) -> None:
    """Validate a viewer manifest against the JSON Schema.

    Args:
        items: The ordered list of viewer items to validate

    Raises:
        ValidationError: If the manifest doesn't conform to the schema
        FileNotFoundError: If schema file is missing
        json.JSONDecodeError: If schema is invalid
    """
    schema = load_schema()
    jsonschema.validate(instance=items, schema=schema)


def describe_validation_error(items: list[ViewerItem], error: ValidationError) -> str:
    """Build a message that points at the failing manifest item.

    Example:
        "Invalid manifest item 1 (wide.svg) at fileDir: 'icons' does not match '^/'"

    Args:
        items: The manifest that failed validation
        error: The first schema violation reported for it

    Returns:
        One-line description naming the item index, its fileName and the field
    """
    path = list(error.absolute_path)
    if not path or not isinstance(path[0], int):
        return f"Invalid manifest: {error.message}"

    index = path[0]
    item = items[index] if 0 <= index < len(items) else None
    file_name = item.get("fileName") if isinstance(item, dict) else None
    subject = f"item {index} ({file_name})" if isinstance(file_name, str) else f"item {index}"

    field = ".".join(str(p) for p in path[1:])
    location = f" at {field}" if field else ""
    return f"Invalid manifest {subject}{location}: {error.message}"


def validate_manifest_with_error_details(items: list[ViewerItem]) -> tuple[bool, str | None]:
    """Validate a manifest and return detailed error information.

    This is a convenience wrapper that catches validation errors and
    returns a message naming the offending item by its fileName.

    Args:
        items: The ordered list of viewer items to validate

    Returns:
        Tuple of (is_valid, error_message). error_message is None if valid.
    """
    try:
        validate_manifest(items)
        return True, None
    except ValidationError as e:
        return False, describe_validation_error(items, e)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        return False, f"Schema error: {e}"
