"""Resolve RESTful helper names such as ``only_to_read`` into action sets.

Available behaviors and their actions::

    Behavior   RESTful actions
    -------------------------------------------------------------
    read       index, show
    create     new, create
    update     edit, update
    delete     destroy
    manage     index, show, new, create, edit, update, destroy

A helper name is ``<prefix>_<behavior>``. The ``to`` prefix checks the
behavior's actions only. ``only_to`` also expects every other action to be
denied, and ``except_to`` is its mirror image::

    Helper            Actions                                 Negated actions
    ----------------------------------------------------------------------------
    to_read           index, show                             -
    only_to_read      index, show                             new, create, edit,
                                                              update, destroy
    except_to_read    new, create, edit, update, destroy      index, show
"""

from __future__ import annotations

import re
from types import MappingProxyType

from permitspec.models import Prefix, ResolvedBehavior

BEHAVIORS = MappingProxyType(
    {
        "read": ("index", "show"),
        "create": ("new", "create"),
        "update": ("edit", "update"),
        "delete": ("destroy",),
        "manage": ("index", "show", "new", "create", "edit", "update", "destroy"),
    }
)

_HELPER_RE = re.compile(r"(to|only_to|except_to)_(.+)")


class UnknownBehaviorError(ValueError):
    """Raised when a helper name has no known prefix or behavior."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown helper method: {name!r}")
        self.name = name


def resolve(name: str) -> ResolvedBehavior:
    """Resolve a helper name into its actions and negated actions.

    Raises :class:`UnknownBehaviorError` for an unrecognized prefix or
    behavior.
    """
    match = _HELPER_RE.fullmatch(name)
    if match is None or match.group(2) not in BEHAVIORS:
        raise UnknownBehaviorError(name)

    prefix = Prefix(match.group(1))
    behavior = match.group(2)
    actions = BEHAVIORS[behavior]

    if prefix is Prefix.TO:
        negated: tuple[str, ...] = ()
    else:
        negated = tuple(a for a in BEHAVIORS["manage"] if a not in actions)

    if prefix is Prefix.EXCEPT_TO:
        actions, negated = negated, actions

    return ResolvedBehavior(
        name=name,
        prefix=prefix,
        behavior=behavior,
        actions=actions,
        negated_actions=negated,
    )


def humanize(name: str) -> str:
    """``only_to_read`` -> ``only to read``."""
    return name.replace("_", " ")


def helper_names() -> list[str]:
    """Return every valid helper name, grouped by prefix."""
    return [f"{p.value}_{b}" for p in Prefix for b in BEHAVIORS]
