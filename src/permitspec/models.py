"""Core data models for permitspec."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Iterator

# check(role, action, controller_class) -> permitted?
PermissionCheck = Callable[[str, str, type], bool]


class Prefix(enum.Enum):
    """Helper name prefixes."""

    TO = "to"
    ONLY_TO = "only_to"
    EXCEPT_TO = "except_to"


class Verdict(enum.Enum):
    """Outcome of evaluating a matcher against a controller."""

    MATCH = "MATCH"
    NO_MATCH = "NO_MATCH"
    PARTIAL = "PARTIAL"


@dataclass(frozen=True)
class ResolvedBehavior:
    """A helper name resolved into permitted and denied actions."""

    name: str
    prefix: Prefix
    behavior: str
    actions: tuple[str, ...]
    negated_actions: tuple[str, ...]

    def __iter__(self) -> Iterator[tuple[str, ...]]:
        # actions, negated_actions = resolve("to_read")
        return iter((self.actions, self.negated_actions))


@dataclass(frozen=True)
class Privilege:
    """A request to check one role against a controller class."""

    role: str
    actions: tuple[str, ...]
    negated_actions: tuple[str, ...]
    controller_class: type
