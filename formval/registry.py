"""Named validator factories and plugin loading."""

from __future__ import annotations

import logging
from importlib import import_module
from typing import Any, Callable, Dict

from . import validators as validators_module

logger = logging.getLogger(__name__)

ValidatorFactory = Callable[..., Callable[[Any], Any]]


class UnknownValidatorError(KeyError):
    """Raised when a validator name is neither registered nor importable."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown validator: {self.name!r}"


class ValidatorRegistry:
    """Registry mapping names to validator factories."""

    def __init__(self) -> None:
        self.factories: Dict[str, ValidatorFactory] = {}

    def register(self, name: str, factory: ValidatorFactory) -> None:
        """Register a validator factory under a name."""

        if name in self.factories and self.factories[name] is not factory:
            logger.warning("Replacing validator factory registered as %r", name)
        self.factories[name] = factory

    def get(self, name: str) -> ValidatorFactory:
        """Look up a registered factory by name.

        Dotted paths are never imported here; hosts load plugins explicitly
        with :meth:`load_entrypoint` and :meth:`register` them.
        """

        factory = self.factories.get(name)
        if factory is None:
            raise UnknownValidatorError(name)
        return factory

    def names(self) -> list[str]:
        return sorted(self.factories)

    def load_entrypoint(self, dotted_path: str) -> ValidatorFactory:
        """Dynamically load a callable via dotted path."""

        module_name, _, attr = dotted_path.rpartition(".")
        logger.debug("Loading validator factory %s from %s", attr, module_name)
        module = import_module(module_name)
        return getattr(module, attr)


def default_registry() -> ValidatorRegistry:
    """Build a registry holding the built-in factories."""

    builtin = ValidatorRegistry()
    builtin.register("string", validators_module.valid_string)
    builtin.register("number", validators_module.valid_number)
    builtin.register("bool", validators_module.valid_bool)
    builtin.register("date", validators_module.valid_date_format)
    builtin.register("dateTime", validators_module.valid_date_time_format)
    builtin.register("dateUTC", validators_module.valid_date_utc_format)
    builtin.register("oneOf", validators_module.one_of)
    builtin.register("required", validators_module.required)
    return builtin


registry = default_registry()

__all__ = [
    "registry",
    "default_registry",
    "ValidatorRegistry",
    "ValidatorFactory",
    "UnknownValidatorError",
]
