"""Configuration model for novel catalog reports."""

from pathlib import Path
from typing import Any, Dict
import json
from dataclasses import dataclass, field, asdict, fields, is_dataclass

from ..exceptions import ConfigurationError
from .config_schema import validate_config_json


@dataclass
class YearRange:
    """Inclusive range of publication years."""
    first: int = 1940
    last: int = 1950


@dataclass
class ReportConfig:
    """Parameters for each section of the catalog report."""
    store_name: str = "Classic Novels Collection"
    search_substring: str = "the"
    decade: int = 2000
    lookup_year: int = 1950
    count_word: str = "heart"
    percent_range: YearRange = field(default_factory=YearRange)
    title_length: int = 15
    shop_exclude: str = "the"

    @classmethod
    def default(cls) -> "ReportConfig":
        """Create a configuration holding the standard report parameters."""
        return cls()


def config_to_dict(config: ReportConfig) -> Dict[str, Any]:
    """Convert a configuration to a JSON-ready dict."""
    return asdict(config)


def _dict_to_dataclass(data, dataclass_type):
    """Convert dict to dataclass recursively."""
    if not is_dataclass(dataclass_type):
        return data

    field_types = {f.name: f.type for f in fields(dataclass_type)}

    kwargs = {}
    for field_name, field_type in field_types.items():
        if field_name in data:
            if is_dataclass(field_type):
                kwargs[field_name] = _dict_to_dataclass(data[field_name], field_type)
            else:
                kwargs[field_name] = data[field_name]

    return dataclass_type(**kwargs)


def config_from_dict(data: Dict[str, Any]) -> ReportConfig:
    """Build a configuration from decoded JSON, validating it first."""
    errors = validate_config_json(data)
    if errors:
        raise ConfigurationError("; ".join(errors))

    return _dict_to_dataclass(data, ReportConfig)


def load_config(config_path: Path) -> ReportConfig:
    """Load configuration from JSON file."""
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"JSON parsing error in {config_path}: {e.msg} at line {e.lineno}, column {e.colno}"
        ) from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration {config_path}: {e}") from e

    return config_from_dict(config_data)


def save_config(config: ReportConfig, config_path: Path) -> None:
    """Save configuration to JSON file."""
    with open(config_path, 'w', encoding='utf-8') as f:
        json.dump(config_to_dict(config), f, indent=2)
