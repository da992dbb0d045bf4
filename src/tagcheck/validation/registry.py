"""Process-wide table of named validation rules.

Every registration installs the rule and its negation (``!name``). Writers
serialize on a lock and publish a new read-only snapshot, so lookups never lock
and never see a half-written entry.
"""

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from types import MappingProxyType

from ..errors import UnknownRuleError

logger = logging.getLogger(__name__)

Predicate = Callable[..., bool]
NEGATION_PREFIX = "!"


@dataclass(frozen=True)
class Rule:
    """A named predicate with its message template.

    The predicate receives the rendered field value followed by the rule
    parameters. The template takes ``{}`` placeholders: the field's display name
    first, then the parameters.
    """
    name: str
    message: str
    predicate: Predicate

    def __call__(self, value: str, *params: str) -> bool:
        return bool(self.predicate(value, *params))

    def negate(self) -> "Rule":
        """The logical inverse, named ``!name`` with "must " turned into "must not "."""
        predicate = self.predicate

        def negated(value: str, *params: str) -> bool:
            return not predicate(value, *params)

        return Rule(
            name=NEGATION_PREFIX + self.name,
            message=self.message.replace("must ", "must not ", 1),
            predicate=negated,
        )


def variadic(fn: Callable[[str], bool]) -> Predicate:
    """Adapt a single-argument check to the predicate signature, ignoring parameters."""
    def predicate(value: str, *params: str) -> bool:
        return fn(value)

    predicate.__name__ = getattr(fn, "__name__", "predicate")
    predicate.__doc__ = fn.__doc__
    return predicate


class Registry:
    """Name-keyed rule table safe for concurrent readers and writers."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._rules: MappingProxyType[str, Rule] = MappingProxyType({})

    def register(self, name: str, message: str, predicate: Predicate) -> Rule:
        """Register ``name`` and its negation, replacing any previous definition."""
        if not name or name.startswith(NEGATION_PREFIX):
            raise ValueError(f"invalid rule name: {name!r}")

        rule = Rule(name, message, predicate)
        negated = rule.negate()
        with self._lock:
            rules = dict(self._rules)
            if name in rules:
                logger.debug(f"Replacing rule: {name}")
            rules[rule.name] = rule
            rules[negated.name] = negated
            self._rules = MappingProxyType(rules)
        return rule

    def register_unary(self, name: str, message: str, fn: Callable[[str], bool]) -> Rule:
        """Register a check that takes no parameters."""
        return self.register(name, message, variadic(fn))

    def rule(self, name: str, message: str, unary: bool = False) -> Callable[[Predicate], Predicate]:
        """Decorator form of ``register``."""
        def decorator(fn: Predicate) -> Predicate:
            if unary:
                self.register_unary(name, message, fn)
            else:
                self.register(name, message, fn)
            return fn
        return decorator

    def get(self, name: str) -> Rule:
        """Fetch a rule by name (``!name`` for a negation)."""
        try:
            return self._rules[name]
        except KeyError:
            raise UnknownRuleError(name) from None

    def names(self, include_negated: bool = False) -> list[str]:
        rules = self._rules
        return sorted(
            name for name in rules
            if include_negated or not name.startswith(NEGATION_PREFIX)
        )

    def snapshot(self) -> MappingProxyType:
        """Current read-only view of all rules."""
        return self._rules

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __len__(self) -> int:
        return len(self._rules)


default_registry = Registry()


def register(name: str, message: str, predicate: Predicate) -> Rule:
    """Register a rule in the default registry."""
    return default_registry.register(name, message, predicate)


def register_unary(name: str, message: str, fn: Callable[[str], bool]) -> Rule:
    """Register a parameterless rule in the default registry."""
    return default_registry.register_unary(name, message, fn)


def rule(name: str, message: str, unary: bool = False) -> Callable[[Predicate], Predicate]:
    """Decorator registering a rule in the default registry."""
    return default_registry.rule(name, message, unary)


def get_rule(name: str) -> Rule:
    """Look up a rule in the default registry."""
    return default_registry.get(name)
