"""HavePermissionFor — fluent matcher for role permissions on a controller.

Usage::

    matcher = have_permission_for("user", check).to("index")
    assert matcher.matches(ArticlesController)

Skipping ``to()`` checks the ``index`` action, so the following is the same::

    assert have_permission_for("user", check).matches(ArticlesController)

Helper names expand into several actions (see :mod:`permitspec.behaviors`)::

    have_permission_for("user", check).with_helper("to_read")
    have_permission_for("writer", check).with_helper("except_to_delete")

For a helper such as ``to_read`` the two predicates evaluate as follows::

    results                          matches()   does_not_match()
    ---------------------------------------------------------------
    {index: True, show: True}        True        False
    {index: True, show: False}       False       False
    {index: False, show: False}      False       True

Focused helpers mirror each other: ``only_to_read`` matching is the same
statement as ``except_to_read`` not matching. Prefer the positive form.

A matcher is a single-use builder. Each chained call mutates the instance;
build a fresh one per expectation and do not share it after evaluation.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from permitspec.behaviors import humanize, resolve
from permitspec.models import (
    PermissionCheck,
    Prefix,
    Privilege,
    ResolvedBehavior,
    Verdict,
)
from permitspec.resource import Resource

logger = logging.getLogger(__name__)

DEFAULT_ACTION = "index"


class HavePermissionFor:
    """Matcher state for one role; see the module docstring."""

    def __init__(self, role: str, check: PermissionCheck) -> None:
        self.role = role
        self.check = check

        self.prefix: Prefix = Prefix.TO
        self.action: Optional[str] = DEFAULT_ACTION
        self.helper: Optional[ResolvedBehavior] = None

        self.actions: tuple[str, ...] = (DEFAULT_ACTION,)
        self.negated_actions: tuple[str, ...] = ()

        self.privilege: Optional[Privilege] = None
        self.resource: Optional[Resource] = None

    def to(self, action: str) -> HavePermissionFor:
        self.prefix = Prefix.TO
        self.action = action
        self.helper = None
        self.actions = (action,)
        self.negated_actions = ()
        return self

    def with_helper(self, name: str) -> HavePermissionFor:
        """Expand a helper name such as ``only_to_read``.

        An unknown name raises :class:`~permitspec.behaviors.UnknownBehaviorError`.
        """
        helper = resolve(name)
        self.prefix = helper.prefix
        self.action = None
        self.helper = helper
        self.actions = helper.actions
        self.negated_actions = helper.negated_actions
        return self

    # --- evaluation ---

    def _build_resource(self, controller: Any) -> Resource:
        controller_class = controller if isinstance(controller, type) else type(controller)
        self.privilege = Privilege(
            role=self.role,
            actions=self.actions,
            negated_actions=self.negated_actions,
            controller_class=controller_class,
        )
        self.resource = Resource(self.privilege, self.check)
        return self.resource

    def evaluate(self, controller: Any) -> Verdict:
        """Run every check against *controller* and return the verdict."""
        resource = self._build_resource(controller)
        resource.run_all()
        verdict = resource.verdict()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "%s %s: %s",
                resource.controller_class.__qualname__,
                self.description,
                verdict.value,
            )
        return verdict

    def matches(self, controller: Any) -> bool:
        return self.evaluate(controller) is Verdict.MATCH

    def does_not_match(self, controller: Any) -> bool:
        return self.evaluate(controller) is Verdict.NO_MATCH

    # --- reporting ---

    @property
    def description(self) -> str:
        return f"have permission for {self.role} {self._humanized_behavior()}"

    @property
    def failure_message(self) -> str:
        return f"Expected {self._common_failure_message()}"

    @property
    def failure_message_when_negated(self) -> str:
        return f"Did not expect {self._common_failure_message()}"

    def _humanized_behavior(self) -> str:
        if self.helper is not None:
            return humanize(self.helper.name)
        return f"{self.prefix.value} {self.action}"

    def _common_failure_message(self) -> str:
        if self.resource is None:
            raise RuntimeError("matcher has not been evaluated")
        return (
            f"{self.resource.controller_class.__qualname__} to {self.description}. "
            f"results: {self.resource.results}, "
            f"negated_results: {self.resource.negated_results}"
        )


def have_permission_for(role: str, check: PermissionCheck) -> HavePermissionFor:
    """Build a matcher for *role*, evaluated with the *check* rule engine."""
    return HavePermissionFor(role, check)
