"""Resource — runs permission checks for a privilege and reduces the results."""

from __future__ import annotations

import logging
from typing import Optional

from permitspec.models import PermissionCheck, Privilege, Verdict

logger = logging.getLogger(__name__)


class Resource:
    """Runs one permission check per action of a :class:`Privilege`.

    Actions are expected to be permitted and negated actions to be denied.
    ``permitted()`` and ``forbidden()`` are independent reductions: a mixed
    outcome satisfies neither.
    """

    def __init__(self, privilege: Privilege, check: PermissionCheck) -> None:
        self._privilege = privilege
        self._check = check
        self._results: Optional[dict[str, bool]] = None
        self._negated_results: Optional[dict[str, bool]] = None

    @property
    def privilege(self) -> Privilege:
        return self._privilege

    @property
    def controller_class(self) -> type:
        return self._privilege.controller_class

    @property
    def results(self) -> dict[str, bool]:
        """Per-action outcomes for the expected-permitted actions."""
        return dict(self._outcomes()[0])

    @property
    def negated_results(self) -> dict[str, bool]:
        """Per-action outcomes for the expected-denied actions."""
        return dict(self._outcomes()[1])

    def _outcomes(self) -> tuple[dict[str, bool], dict[str, bool]]:
        if self._results is None or self._negated_results is None:
            raise RuntimeError("Resource.run_all() has not been called")
        return self._results, self._negated_results

    def _run(self, actions: tuple[str, ...]) -> dict[str, bool]:
        p = self._privilege
        outcomes: dict[str, bool] = {}
        for action in actions:
            outcomes[action] = bool(self._check(p.role, action, p.controller_class))
            logger.debug(
                "check %s#%s for %s: %s",
                p.controller_class.__name__,
                action,
                p.role,
                outcomes[action],
            )
        return outcomes

    def run_all(self) -> None:
        """Check every action and negated action.

        Exceptions raised by the permission check propagate unchanged.
        """
        self._results = self._run(self._privilege.actions)
        self._negated_results = self._run(self._privilege.negated_actions)

    def permitted(self) -> bool:
        """All actions permitted and all negated actions denied."""
        return all(self.results.values()) and not any(
            self.negated_results.values()
        )

    def forbidden(self) -> bool:
        """All actions denied and all negated actions permitted."""
        return not any(self.results.values()) and all(
            self.negated_results.values()
        )

    def verdict(self) -> Verdict:
        if self.permitted():
            return Verdict.MATCH
        if self.forbidden():
            return Verdict.NO_MATCH
        return Verdict.PARTIAL
