"""pytest fixtures for permitspec.

Override ``permission_check`` in your ``conftest.py`` to plug in the rule
engine under test::

    @pytest.fixture
    def permission_check():
        return lambda role, action, controller_class: rules.allows(role, action, controller_class)

    def test_user_reads_articles(have_permission_for):
        assert_permitted(have_permission_for("user").with_helper("only_to_read"), ArticlesController)
"""

from __future__ import annotations

from typing import Callable

import pytest

from permitspec.matcher import HavePermissionFor
from permitspec.models import PermissionCheck


def _unconfigured_check(role: str, action: str, controller_class: type) -> bool:
    raise NotImplementedError(
        "No permission check configured; override the 'permission_check' fixture"
    )


@pytest.fixture
def permission_check() -> PermissionCheck:
    """The rule engine consulted by ``have_permission_for``."""
    return _unconfigured_check


@pytest.fixture
def have_permission_for(
    permission_check: PermissionCheck,
) -> Callable[[str], HavePermissionFor]:
    """Factory building a fresh matcher per call, bound to ``permission_check``."""

    def factory(role: str) -> HavePermissionFor:
        return HavePermissionFor(role, permission_check)

    return factory
