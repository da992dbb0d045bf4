"""tagcheck - Tag-driven validation of dataclasses and pydantic models.

tagcheck walks arbitrary structured values, applies the rules declared in each
field's tag and reports every violation with its path from the root.
"""

__version__ = "0.1.0"
__author__ = "rpapub"
__email__ = "contact@rpapub.dev"
__description__ = "Tag-driven validation of dataclasses and pydantic models"

from tagcheck.config import TagcheckConfig, ValidationConfig, load_config
from tagcheck.errors import (
    ArgumentError,
    ConfigurationError,
    RequiredFieldError,
    RuleFailureError,
    TagcheckError,
    UnknownRuleError,
    ValidationError,
    ValidationErrors,
    WalkDepthError,
    WalkError,
)
from tagcheck.validation import (
    ValidationEngine,
    check,
    check_tags,
    get_rule,
    parse_tag,
    register,
    register_unary,
    rule,
    validate,
)
from tagcheck.walk import field_paths, walk

__all__ = [
    "__version__",
    "__author__",
    "__email__",
    "__description__",
    "ArgumentError",
    "ConfigurationError",
    "RequiredFieldError",
    "RuleFailureError",
    "TagcheckConfig",
    "TagcheckError",
    "UnknownRuleError",
    "ValidationConfig",
    "ValidationEngine",
    "ValidationError",
    "ValidationErrors",
    "WalkDepthError",
    "WalkError",
    "check",
    "check_tags",
    "field_paths",
    "get_rule",
    "load_config",
    "parse_tag",
    "register",
    "register_unary",
    "rule",
    "validate",
    "walk",
]
