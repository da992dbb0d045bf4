"""Parser for rule tags such as ``required,length(3|5),!uuid~must not be a UUID``."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Punctuation allowed in a tag entry besides letters and digits
TAG_PUNCTUATION = "\\'\"!#$%&()*+-./:<=>?@[]^_{|}~ "

PARAM_SEPARATOR = "|"
MESSAGE_SEPARATOR = "~"


@dataclass(frozen=True)
class TagOption:
    """One parsed rule invocation.

    ``name`` keeps a leading ``!`` when the negation was requested; ``params``
    is the raw text between the parentheses.
    """
    name: str
    params: str = ""
    message: str = ""
    order: int = 0

    @property
    def negated(self) -> bool:
        return self.name.startswith("!")

    @property
    def bare_name(self) -> str:
        return self.name[1:] if self.negated else self.name

    @property
    def has_custom_message(self) -> bool:
        return bool(self.message)

    def param_list(self) -> list[str]:
        if not self.params:
            return []
        return self.params.split(PARAM_SEPARATOR)


class RuleSet:
    """Rule invocations of one field keyed by name, iterated in declaration order."""

    def __init__(self) -> None:
        self._options: dict[str, TagOption] = {}

    def add(self, option: TagOption) -> None:
        self._options.pop(option.name, None)
        self._options[option.name] = option

    def discard(self, name: str) -> TagOption | None:
        return self._options.pop(name, None)

    def get(self, name: str) -> TagOption | None:
        return self._options.get(name)

    def names(self) -> list[str]:
        return [option.name for option in self]

    def __contains__(self, name: object) -> bool:
        return name in self._options

    def __iter__(self) -> Iterator[TagOption]:
        return iter(sorted(self._options.values(), key=lambda option: option.order))

    def __len__(self) -> int:
        return len(self._options)

    def __repr__(self) -> str:
        return f"RuleSet({self.names()!r})"


def is_valid_tag(text: str) -> bool:
    """Check a tag entry against the identifier grammar."""
    if not text:
        return False
    return all(c.isalpha() or c.isdecimal() or c in TAG_PUNCTUATION for c in text)


def split_rule(text: str) -> tuple[str, str]:
    """Split ``name(params)`` into its name and raw parameter text."""
    if text.endswith(")"):
        start = text.find("(")
        if start > 0:
            return text[:start], text[start + 1:-1]
    return text, ""


def parse_tag(tag: str) -> RuleSet:
    """Parse a rule tag into an ordered RuleSet.

    Entries failing the identifier grammar are dropped. A repeated rule name
    keeps its last declaration.
    """
    rules = RuleSet()
    for order, entry in enumerate(tag.split(",")):
        entry = entry.strip()
        text, _, message = entry.partition(MESSAGE_SEPARATOR)
        if not is_valid_tag(text):
            if entry:
                logger.debug(f"Dropping malformed tag entry: {entry!r}")
            continue

        name, params = split_rule(text)
        rules.add(TagOption(name=name, params=params, message=message, order=order))
    return rules
