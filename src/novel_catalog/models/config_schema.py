"""JSON schema and validation for report configuration files."""

from typing import Any, List

import jsonschema

from ..domain.novel import CURRENT_YEAR, FIRST_YEAR

REPORT_CONFIG_SCHEMA = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "store_name": {
            "type": "string",
            "minLength": 1,
            "pattern": r"\S",
            "description": "Name of the bookstore catalog"
        },
        "search_substring": {
            "type": "string",
            "description": "Text to look for in titles"
        },
        "decade": {
            "type": "integer",
            "description": "First year of the decade to list"
        },
        "lookup_year": {
            "type": "integer",
            "minimum": FIRST_YEAR,
            "maximum": CURRENT_YEAR,
            "description": "Exact publication year to check for"
        },
        "count_word": {
            "type": "string",
            "description": "Word to count across titles"
        },
        "percent_range": {
            "type": "object",
            "required": ["first", "last"],
            "additionalProperties": False,
            "properties": {
                "first": {"type": "integer", "minimum": FIRST_YEAR, "maximum": CURRENT_YEAR},
                "last": {"type": "integer", "minimum": FIRST_YEAR, "maximum": CURRENT_YEAR}
            },
            "description": "Inclusive year range for the percentage report"
        },
        "title_length": {
            "type": "integer",
            "minimum": 0,
            "description": "Exact title length to list"
        },
        "shop_exclude": {
            "type": "string",
            "description": "Titles containing this text are left out of the sorted shop listing"
        }
    }
}


def validate_config_json(config_data: Any) -> List[str]:
    """Validate a report configuration JSON object.

    Args:
        config_data: The decoded configuration data

    Returns:
        List of validation error messages, empty when the data is valid
    """
    validator = jsonschema.Draft7Validator(
        REPORT_CONFIG_SCHEMA,
        format_checker=jsonschema.Draft7Validator.FORMAT_CHECKER,
    )

    errors = []
    for error in sorted(validator.iter_errors(config_data), key=str):
        path = " -> ".join(str(p) for p in error.absolute_path) if error.absolute_path else "root"
        errors.append(f"Validation error at {path}: {error.message}")

    range_data = config_data.get("percent_range") if isinstance(config_data, dict) else None
    if not errors and range_data and range_data["first"] > range_data["last"]:
        errors.append("Validation error at percent_range: first must not be after last")

    return errors
