"""Configuration classes for xml-light.

This module provides configuration objects for serialization, parsing and
global behaviour. Components validate themselves on construction; the
aggregate ``XMLLightConfig`` is immutable and can be round-tripped via JSON.
"""

import json
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Any, Dict, List, Optional

_COMPONENTS = ("serializer", "parser", "global_")


class OutputFormat(Enum):
    """Pretty-printing styles."""

    XML = auto()      # Full tag-delimited pretty print
    NO_TAG = auto()   # Human readable, tags rewritten as labels


@dataclass
class SerializerConfig:
    """Configuration for rendering trees back to text."""

    pretty: bool = False
    format: OutputFormat = OutputFormat.XML
    trailing_newline: bool = False

    def __post_init__(self) -> None:
        """Validate serializer configuration."""
        if not isinstance(self.format, OutputFormat):
            raise ValueError("format must be an OutputFormat")


@dataclass
class ParserConfig:
    """Configuration for the lxml-backed parser collaborator.

    ``resolve_entities`` only ever expands entities declared in the internal
    subset; external (SYSTEM/PUBLIC) entities are never loaded.
    """

    keep_whitespace: bool = False
    resolve_entities: bool = True
    strip_cdata: bool = True
    huge_tree: bool = False
    max_input_size_bytes: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate parser configuration."""
        limit = self.max_input_size_bytes
        if limit is not None:
            if isinstance(limit, bool) or not isinstance(limit, int):
                raise ValueError("max_input_size_bytes must be an integer or None")
            if limit <= 0:
                raise ValueError("max_input_size_bytes must be > 0 or None")


@dataclass
class GlobalConfig:
    """Settings that apply across all components."""

    logging_level: str = "WARNING"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate global configuration."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.logging_level not in valid_levels:
            raise ValueError(f"logging_level must be one of {valid_levels}")


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class XMLLightConfig:
    """Complete configuration for parsing and rendering.

    Immutable; use ``override`` to derive a modified copy.
    """

    serializer: SerializerConfig = field(default_factory=SerializerConfig)
    parser: ParserConfig = field(default_factory=ParserConfig)
    global_: GlobalConfig = field(default_factory=GlobalConfig)

    name: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the complete configuration."""
        try:
            self.serializer.__post_init__()
            self.parser.__post_init__()
            self.global_.__post_init__()
        except (TypeError, ValueError) as e:
            raise ConfigValidationError(str(e)) from e

        if self.serializer.trailing_newline and self.serializer.pretty:
            raise ConfigValidationError(
                "trailing_newline only applies to compact output",
                field_name="serializer.trailing_newline",
                suggestions=["Disable serializer.pretty",
                             "Disable serializer.trailing_newline"],
            )

    def override(self, **kwargs: Any) -> "XMLLightConfig":
        """Create a new configuration with specific overrides.

        Args:
            **kwargs: Fields to override, nested with a double underscore

        Returns:
            New XMLLightConfig instance with overrides applied

        Example:
            >>> config = XMLLightConfig()
            >>> config.override(serializer__pretty=True).serializer.pretty
            True
        """
        nested_overrides: Dict[str, Dict[str, Any]] = {}
        top_level: Dict[str, Any] = {}
        for key, value in kwargs.items():
            if "__" in key:
                # Matched by prefix so ``global___correlation_id`` reaches ``global_``
                component = next(
                    (name for name in _COMPONENTS if key.startswith(name + "__")),
                    key.split("__", 1)[0],
                )
                field_name = key[len(component) + 2:]
                if component not in _COMPONENTS:
                    raise ConfigValidationError(
                        f"Unknown configuration component: {component}",
                        field_name=key,
                    )
                nested_overrides.setdefault(component, {})[field_name] = value
            else:
                top_level[key] = value

        new_fields: Dict[str, Any] = {}
        for component in _COMPONENTS:
            current = getattr(self, component)
            if component in nested_overrides:
                try:
                    new_fields[component] = replace(current, **nested_overrides[component])
                except (TypeError, ValueError) as e:
                    raise ConfigValidationError(str(e), field_name=component) from e

        new_fields.update(top_level)
        return replace(self, **new_fields)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        def _dataclass_to_dict(obj: Any) -> Any:
            if hasattr(obj, "__dataclass_fields__"):
                return {
                    name: _dataclass_to_dict(getattr(obj, name))
                    for name in obj.__dataclass_fields__
                }
            if isinstance(obj, Enum):
                return obj.name
            return obj

        result = _dataclass_to_dict(self)
        if not isinstance(result, dict):
            raise ConfigValidationError("Configuration serialization failed")
        return result

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "XMLLightConfig":
        """Create configuration from dictionary. Unknown keys are rejected."""
        def _dict_to_dataclass(data_dict: Dict[str, Any], target_class: type) -> Any:
            if not isinstance(data_dict, dict):
                raise ConfigValidationError(
                    f"Expected a mapping for {target_class.__name__}"
                )
            known = target_class.__dataclass_fields__  # type: ignore[attr-defined]
            unknown = sorted(set(data_dict) - set(known))
            if unknown:
                raise ConfigValidationError(
                    f"Unknown {target_class.__name__} fields: {', '.join(unknown)}",
                    field_name=unknown[0],
                )

            field_values: Dict[str, Any] = {}
            for field_name, field_info in known.items():
                if field_name not in data_dict:
                    continue
                value = data_dict[field_name]
                field_type = field_info.type

                if hasattr(field_type, "__dataclass_fields__"):
                    field_values[field_name] = _dict_to_dataclass(value, field_type)
                elif hasattr(field_type, "__members__") and isinstance(value, str):
                    try:
                        field_values[field_name] = field_type[value]
                    except KeyError as e:
                        raise ConfigValidationError(
                            f"Invalid value for {field_name}: {value}",
                            field_name=field_name,
                        ) from e
                else:
                    field_values[field_name] = value

            try:
                return target_class(**field_values)
            except (TypeError, ValueError) as e:
                raise ConfigValidationError(str(e)) from e

        return _dict_to_dataclass(data, cls)

    @classmethod
    def from_json(cls, json_str: str) -> "XMLLightConfig":
        """Create configuration from JSON string."""
        return cls.from_dict(json.loads(json_str))

    # Preset factory methods
    @classmethod
    def compact(cls) -> "XMLLightConfig":
        """Single-line output with no added whitespace."""
        return cls(name="compact")

    @classmethod
    def pretty(cls) -> "XMLLightConfig":
        """Indented XML output."""
        return cls(
            serializer=SerializerConfig(pretty=True, format=OutputFormat.XML),
            name="pretty",
        )

    @classmethod
    def human(cls) -> "XMLLightConfig":
        """Indented tag-free output for people to read."""
        return cls(
            serializer=SerializerConfig(pretty=True, format=OutputFormat.NO_TAG),
            name="human",
        )
