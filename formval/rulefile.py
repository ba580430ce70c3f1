"""Single-value validation pipelines described in YAML rule files."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Optional

import yaml
from jsonschema import ValidationError, validate

from .combinators import chain, first_error
from .registry import ValidatorRegistry, registry as default_registry
from .schemas import RULE_FILE_SCHEMA

logger = logging.getLogger(__name__)

MODES = {"chain": chain, "first_error": first_error}


class RuleFileError(ValueError):
    """Raised when a rule file cannot be parsed or fails schema validation."""

    def __init__(self, message: str, *, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


@dataclass(slots=True)
class StepConfig:
    """One validator in a pipeline: a registry name, override and factory options."""

    validator: str
    message: Optional[str] = None
    options: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class PipelineConfig:
    """Configuration for a validation pipeline over one value."""

    steps: list[StepConfig] = field(default_factory=list)
    mode: str = "chain"

    def __post_init__(self) -> None:
        if self.mode not in MODES:
            raise ValueError("mode must be 'chain' or 'first_error'")


def parse_rule_file(data: Any, *, path: Optional[Path] = None) -> PipelineConfig:
    """Validate a decoded rule file document and convert it to a config."""

    try:
        validate(instance=data, schema=RULE_FILE_SCHEMA)
    except ValidationError as error:
        raise RuleFileError(f"Invalid rule file: {error.message}", path=path) from error

    steps = []
    for entry in data["validators"]:
        options = {key: value for key, value in entry.items() if key not in {"validator", "message"}}
        steps.append(StepConfig(validator=entry["validator"], message=entry.get("message"), options=options))
    return PipelineConfig(steps=steps, mode=data.get("mode", "chain"))


def load_rule_file(path: Path) -> PipelineConfig:
    """Load a pipeline configuration from YAML."""

    try:
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
    except yaml.YAMLError as error:
        raise RuleFileError(f"Rule file is not valid YAML: {error}", path=path) from error
    if not isinstance(data, dict):
        raise RuleFileError("Rule file must be a mapping", path=path)
    config = parse_rule_file(data, path=path)
    logger.debug("Loaded %d validators from %s", len(config.steps), path)
    return config


def build_pipeline(
    config: PipelineConfig, registry: ValidatorRegistry = default_registry
) -> Callable[[Any], list[Any]]:
    """Instantiate every step and combine them according to the config mode.

    Factories that reject a step's options raise :class:`RuleFileError`.
    """

    built = []
    for step in config.steps:
        factory = registry.get(step.validator)
        kwargs = dict(step.options)
        if step.message is not None:
            kwargs["message"] = step.message
        try:
            built.append(factory(**kwargs))
        except (TypeError, ValueError) as error:
            raise RuleFileError(f"Cannot build validator {step.validator!r}: {error}") from error
    return MODES[config.mode](*built)


__all__ = [
    "MODES",
    "RuleFileError",
    "StepConfig",
    "PipelineConfig",
    "parse_rule_file",
    "load_rule_file",
    "build_pipeline",
]
