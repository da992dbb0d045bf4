"""Tag-driven validation of structured values.

The engine walks a dataclass or pydantic instance, reads each field's rule tag,
and collects every violation into one ``ValidationErrors`` report:

    @dataclass
    class Engine:
        cylinders: int = field(default=0, metadata={"is": "required,in(4|6|8)"})

    ok, errors = validate(Engine(cylinders=5))
    # errors: "cylinders: cylinders must be one of allowed values"
"""

import logging
import re
from typing import Any

from ..config import ValidationConfig
from ..errors import (
    ArgumentError,
    ConfigurationError,
    RequiredFieldError,
    RuleFailureError,
    UnknownRuleError,
    ValidationErrors,
)
from ..walk import FieldInfo, Walker, is_empty, is_struct, render
from .registry import Registry, default_registry
from .tags import RuleSet, parse_tag

logger = logging.getLogger(__name__)

REQUIRED = "required"
SKIP_TAG = "-"
REQUIRED_MESSAGE = "{} is a required field"
UNKNOWN_RULE_MESSAGE = '{} uses unknown validator "{}"'

RX_PLACEHOLDER = re.compile(r"\{\}")


def format_message(template: str, name: str, params: list[str]) -> str:
    """Fill a ``{}`` template with the display name followed by the parameters.

    Missing parameters render as empty text; surplus parameters are dropped.
    Any other braces in the template are kept as written.
    """
    args = iter([name, *params])
    return RX_PLACEHOLDER.sub(lambda _: next(args, ""), template)


class ValidationEngine:
    """Validates structured values against their field rule tags.

    Args:
        config: Tag keys and traversal limits (defaults when omitted)
        registry: Rule table to resolve names against (the process-wide one by default)
    """

    def __init__(self, config: ValidationConfig | None = None, registry: Registry | None = None):
        self.config = config or ValidationConfig()
        self.registry = registry if registry is not None else default_registry
        self.walker = Walker(
            name_key=self.config.name_key,
            max_depth=self.config.max_depth,
            skip_cycles=self.config.skip_cycles,
        )

    def validate(self, value: Any) -> tuple[bool, ValidationErrors | None]:
        """Validate ``value`` and everything reachable from it.

        Args:
            value: Dataclass or pydantic model instance

        Returns:
            (True, None) when every rule holds, otherwise (False, report)

        Raises:
            ArgumentError: If value is None, a class or not a structured value
            WalkError: If the value graph cannot be traversed
        """
        _check_root(value)
        root = type(value).__name__
        logger.info(f"Validating {root}")

        errors = ValidationErrors()

        def visit(node: Any, field: FieldInfo | None, path: tuple[str, ...]) -> None:
            if field is not None:
                self._validate_field(node, field, path, errors)

        self.walker.walk(value, visit)

        if errors:
            logger.info(f"Validation of {root} finished with {len(errors)} error(s)")
            return False, errors
        logger.info(f"Validation of {root} passed")
        return True, None

    def check(self, value: Any) -> None:
        """Validate ``value`` and raise the report if anything fails.

        Raises:
            ValidationErrors: If at least one rule fails
        """
        ok, errors = self.validate(value)
        if not ok:
            raise errors

    def check_tags(self, value: Any) -> None:
        """Ensure every rule named in the tags of ``value`` is registered.

        Raises:
            ConfigurationError: For the first tag entry naming an unknown rule
        """
        _check_root(value)

        def visit(node: Any, field: FieldInfo | None, path: tuple[str, ...]) -> ConfigurationError | None:
            if field is None:
                return None
            rules = self._rules_for(field)
            if rules is None:
                return None
            for option in rules:
                if option.name != REQUIRED and option.name not in self.registry:
                    return _unknown_rule(field, option.name, path)
            return None

        error = self.walker.walk(value, visit)
        if error is not None:
            raise error

    def _rules_for(self, field: FieldInfo) -> RuleSet | None:
        tag = field.tag(self.config.tag_key).strip()
        if not tag or tag == SKIP_TAG:
            return None
        return parse_tag(tag)

    def _validate_field(self, node: Any, field: FieldInfo, path: tuple[str, ...],
                        errors: ValidationErrors) -> None:
        rules = self._rules_for(field)
        if not rules:
            return

        where = ".".join(path)
        if is_empty(node):
            required = rules.get(REQUIRED)
            if required is not None:
                logger.debug(f"{where}: required field is empty")
                message = required.message or REQUIRED_MESSAGE.format(field.name)
                errors.append(RequiredFieldError(field.name, REQUIRED, message, path, required.has_custom_message))
            return

        rules.discard(REQUIRED)
        text = render(node)
        for option in rules:
            try:
                rule = self.registry.get(option.name)
            except UnknownRuleError:
                logger.warning(f"{where}: unknown validator {option.name!r}")
                errors.append(_unknown_rule(field, option.name, path))
                continue

            params = option.param_list()
            logger.debug(f"{where}: applying {option.name} {params}")
            if rule(text, *params):
                continue

            message = option.message or format_message(rule.message, field.name, params)
            errors.append(RuleFailureError(field.name, option.name, message, path, option.has_custom_message))
            break


def _unknown_rule(field: FieldInfo, rule: str, path: tuple[str, ...]) -> ConfigurationError:
    return ConfigurationError(field.name, rule, UNKNOWN_RULE_MESSAGE.format(field.name, rule), path)


def _check_root(value: Any) -> None:
    if value is None:
        raise ArgumentError("cannot validate None")
    if isinstance(value, type):
        raise ArgumentError(f"expected an instance, got the class {value.__name__}")
    if not is_struct(value):
        raise ArgumentError(f"expected a dataclass or pydantic model instance, got {type(value).__name__}")


_default_engine = ValidationEngine()


def validate(value: Any) -> tuple[bool, ValidationErrors | None]:
    """Validate ``value`` with the default engine."""
    return _default_engine.validate(value)


def check(value: Any) -> None:
    """Validate ``value`` with the default engine, raising ValidationErrors on failure."""
    _default_engine.check(value)


def check_tags(value: Any) -> None:
    """Raise ConfigurationError if a tag of ``value`` names an unregistered rule."""
    _default_engine.check_tags(value)


__all__ = [
    "ValidationEngine",
    "check",
    "check_tags",
    "format_message",
    "validate",
]
