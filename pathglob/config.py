"""Configuration loading for named glob patterns."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

CONFIG_DIR = ".pathglob"
CONFIG_FILE = "config.yml"


class ConfigValidationError(Exception):
    """Raised when config.yml has invalid values."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        message = "Invalid config.yml:\n" + "\n".join(f"  - {e}" for e in errors)
        super().__init__(message)


# Schema definition for validation
CONFIG_SCHEMA: dict[str, dict[str, Any]] = {
    "patterns": {"type": dict, "key_type": str, "value_type": str, "non_empty": True},
    "strict": {"type": bool},
}


def validate_config_data(data: dict[str, Any]) -> list[str]:
    """Validate config data against the schema.

    Returns a list of error messages (empty if valid).
    """
    errors: list[str] = []

    known_keys = set(CONFIG_SCHEMA.keys())
    for key in data:
        if key not in known_keys:
            errors.append(f"Unknown config key: '{key}'")

    for key, schema in CONFIG_SCHEMA.items():
        if key not in data:
            continue

        value = data[key]

        if value is None:
            errors.append(f"'{key}' cannot be null")
            continue

        expected_type = schema["type"]
        if not isinstance(value, expected_type):
            errors.append(f"'{key}' must be {expected_type.__name__}, got {type(value).__name__}")
            continue

        if expected_type is dict:
            if schema.get("non_empty") and not value:
                errors.append(f"'{key}' must not be empty")

            key_type = schema["key_type"]
            value_type = schema["value_type"]
            for name, item in value.items():
                if not isinstance(name, key_type):
                    errors.append(
                        f"'{key}' keys must be {key_type.__name__}, got {type(name).__name__}"
                    )
                    continue
                if not isinstance(item, value_type):
                    errors.append(
                        f"'{key}.{name}' must be {value_type.__name__}, got {type(item).__name__}"
                    )

    return errors


@dataclass
class Config:
    """Named glob patterns for a project."""

    patterns: dict[str, str] = field(default_factory=dict)
    strict: bool = False  # Treat invalid patterns as fatal instead of skipping them

    @classmethod
    def load(cls, root: Path) -> "Config":
        """Load config from .pathglob/config.yml, or return the defaults."""
        config_path = root / CONFIG_DIR / CONFIG_FILE
        if config_path.exists():
            return cls.from_yaml(config_path)

        return cls()

    @classmethod
    def from_yaml(cls, config_path: Path) -> "Config":
        """Load config from YAML file.

        Raises:
            ConfigValidationError: If the config has invalid values
            yaml.YAMLError: If the YAML is malformed
        """
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ConfigValidationError([f"Expected a mapping, got {type(data).__name__}"])

        errors = validate_config_data(data)
        if errors:
            raise ConfigValidationError(errors)

        return cls(
            patterns=dict(data.get("patterns", {})),
            strict=data.get("strict", False),
        )

    @classmethod
    def generate_template(cls) -> str:
        """Generate a template config.yml."""
        lines = [
            "# pathglob configuration",
            "#",
            "# Glob notation:",
            "#   ?   one character within a path component",
            "#   *   zero or more characters within a path component",
            "#   **  zero or more characters across path components",
            "#   |   alternate paths, e.g. /src/**|/lib/**",
            "",
            "patterns:",
            '  docs: "/docs/**"',
            '  sources: "/src/**|/lib/**"',
            "",
            "# Fail on invalid patterns instead of skipping them",
            f"strict: {str(cls().strict).lower()}",
        ]

        return "\n".join(lines) + "\n"
