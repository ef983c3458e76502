"""
Schema Validation - JSON Schema validation utilities.

Actions declare a Draft 7 schema for their input payload. The schema is
checked once when the action is built and every payload is checked
against it in read_param().
"""

import logging
from typing import Any, Dict, Optional, Tuple

from jsonschema import Draft7Validator, SchemaError, ValidationError

logger = logging.getLogger(__name__)


def validate_schema(schema: Dict[str, Any]) -> Tuple[bool, Optional[str]]:
    """
    Check that an action input schema is a valid Draft 7 schema.

    Returns:
        Tuple of (is_valid, error_message)
    """
    try:
        Draft7Validator.check_schema(schema)
    except SchemaError as e:
        return False, f"Invalid input schema: {e.message}"
    return True, None


def validate_payload_against_schema(
    payload: Any, schema: Dict[str, Any]
) -> Tuple[bool, Optional[str]]:
    """
    Validate a decoded payload against a JSON Schema.

    Args:
        payload: The decoded payload to validate
        schema: The JSON Schema to validate against

    Returns:
        Tuple of (is_valid, error_message). All violations are reported,
        each prefixed with its path in the payload.
    """
    try:
        validator = Draft7Validator(schema)
        errors = list(validator.iter_errors(payload))

        if not errors:
            return True, None

        error_messages = []
        for error in errors:
            path = ".".join(str(p) for p in error.absolute_path) or "(root)"
            error_messages.append(f"{path}: {error.message}")

        return False, "; ".join(error_messages)

    except ValidationError as e:
        return False, f"Validation error: {str(e)}"
    except Exception as e:
        logger.error(f"Unexpected error during validation: {e}")
        return False, f"Validation failed: {str(e)}"
