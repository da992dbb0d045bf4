"""Tag parsing, the rule registry, the standard rule library and the validation engine."""

from . import rules  # noqa: F401  registers the standard rules
from .engine import ValidationEngine, check, check_tags, format_message, validate
from .registry import Registry, Rule, default_registry, get_rule, register, register_unary, rule
from .tags import RuleSet, TagOption, parse_tag

__all__ = [
    "Registry",
    "Rule",
    "RuleSet",
    "TagOption",
    "ValidationEngine",
    "check",
    "check_tags",
    "default_registry",
    "format_message",
    "get_rule",
    "parse_tag",
    "register",
    "register_unary",
    "rule",
    "validate",
]
