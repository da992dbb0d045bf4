"""Exception hierarchy for tagcheck.

Fatal problems (a bad validation root, a walk that cannot proceed) are raised.
Data problems are collected as ``ValidationError`` instances inside a single
``ValidationErrors`` report.
"""

from collections.abc import Iterable, Iterator, Sequence


class TagcheckError(Exception):
    """Base class for all tagcheck errors."""


class ArgumentError(TagcheckError, TypeError):
    """Raised when the value handed to the engine cannot be validated."""


class WalkError(TagcheckError, ValueError):
    """Raised when a value graph cannot be traversed."""


class WalkDepthError(WalkError):
    """Raised when a value graph is nested deeper than the configured limit."""

    def __init__(self, max_depth: int, path: Sequence[str]):
        self.max_depth = max_depth
        self.path = tuple(path)
        where = ".".join(self.path) or "<root>"
        super().__init__(f"maximum depth of {max_depth} exceeded at {where}")


class UnknownRuleError(TagcheckError, KeyError):
    """Raised when a rule name is not present in the registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"unknown validator: {self.name!r}"


class ValidationError(TagcheckError):
    """A single field violation found during validation."""

    def __init__(self, name: str, validator: str, message: str,
                 path: Sequence[str] = (), custom: bool = False):
        self.name = name
        self.validator = validator
        self.message = message
        self.path = list(path)
        self.custom = custom
        super().__init__(message)

    @property
    def dotted_path(self) -> str:
        return ".".join(self.path)

    def __str__(self) -> str:
        return f"{self.dotted_path}: {self.message}"

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(name={self.name!r}, validator={self.validator!r}, "
                f"path={self.dotted_path!r}, message={self.message!r})")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationError):
            return NotImplemented
        return (type(self) is type(other)
                and (self.name, self.validator, self.message, self.path, self.custom)
                == (other.name, other.validator, other.message, other.path, other.custom))

    def __hash__(self) -> int:
        return hash((type(self), self.name, self.validator, self.message, tuple(self.path)))

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "path": self.dotted_path,
            "name": self.name,
            "validator": self.validator,
            "message": self.message,
            "custom": self.custom,
        }


class RequiredFieldError(ValidationError):
    """An empty field is tagged ``required``."""


class RuleFailureError(ValidationError):
    """A non-empty field fails one of its rules."""


class ConfigurationError(ValidationError):
    """A tag names a rule that is not registered."""


class ValidationErrors(TagcheckError):
    """Every violation found in one validation call, in discovery order.

    The string form is sorted so that the same input always renders the same
    report.
    """

    def __init__(self, errors: Iterable[ValidationError] = ()):
        self.errors: list[ValidationError] = list(errors)
        super().__init__(self.errors)

    def append(self, error: ValidationError) -> None:
        self.errors.append(error)

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)

    def __getitem__(self, index: int) -> ValidationError:
        return self.errors[index]

    def __bool__(self) -> bool:
        return bool(self.errors)

    def __str__(self) -> str:
        return ";".join(sorted(str(error) for error in self.errors))

    def __repr__(self) -> str:
        return f"ValidationErrors({self.errors!r})"

    def messages(self) -> list[str]:
        """Messages in discovery order."""
        return [error.message for error in self.errors]

    def by_path(self) -> dict[str, list[ValidationError]]:
        """Group errors by their dotted path."""
        grouped: dict[str, list[ValidationError]] = {}
        for error in self.errors:
            grouped.setdefault(error.dotted_path, []).append(error)
        return grouped

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "count": len(self.errors),
            "errors": [error.to_dict() for error in self.errors],
        }
