"""Tests for Resource — per-action checks and the permitted/forbidden reductions."""

import pytest

from permitspec.models import Privilege, Verdict
from permitspec.resource import Resource


class ArticlesController:
    pass


def _make_privilege(**overrides) -> Privilege:
    defaults = dict(
        role="user",
        actions=("index", "show"),
        negated_actions=(),
        controller_class=ArticlesController,
    )
    defaults.update(overrides)
    return Privilege(**defaults)


def _make_check(allowed):
    """Check that permits exactly the actions in *allowed*, recording calls."""
    calls = []

    def check(role, action, controller_class):
        calls.append((role, action, controller_class))
        return action in allowed

    check.calls = calls
    return check


def test_run_all_checks_each_action_once():
    check = _make_check({"index"})
    resource = Resource(
        _make_privilege(negated_actions=("destroy",)), check
    )
    resource.run_all()

    assert check.calls == [
        ("user", "index", ArticlesController),
        ("user", "show", ArticlesController),
        ("user", "destroy", ArticlesController),
    ]
    assert resource.results == {"index": True, "show": False}
    assert resource.negated_results == {"destroy": False}


@pytest.mark.parametrize(
    "allowed, permitted, forbidden, verdict",
    [
        ({"index", "show"}, True, False, Verdict.MATCH),
        ({"index"}, False, False, Verdict.PARTIAL),
        (set(), False, True, Verdict.NO_MATCH),
    ],
)
def test_reductions_without_negation(allowed, permitted, forbidden, verdict):
    resource = Resource(_make_privilege(), _make_check(allowed))
    resource.run_all()
    assert resource.permitted() is permitted
    assert resource.forbidden() is forbidden
    assert resource.verdict() is verdict


def test_negated_action_permitted_breaks_match():
    resource = Resource(
        _make_privilege(negated_actions=("destroy",)),
        _make_check({"index", "show", "destroy"}),
    )
    resource.run_all()
    assert resource.permitted() is False
    assert resource.forbidden() is False
    assert resource.verdict() is Verdict.PARTIAL


def test_fully_opposite_outcome_is_forbidden():
    resource = Resource(
        _make_privilege(negated_actions=("destroy",)),
        _make_check({"destroy"}),
    )
    resource.run_all()
    assert resource.forbidden() is True
    assert resource.verdict() is Verdict.NO_MATCH


def test_truthy_results_are_coerced_to_bool():
    resource = Resource(_make_privilege(actions=("index",)), lambda r, a, c: 1)
    resource.run_all()
    assert resource.results == {"index": True}


def test_results_before_run_all_raise():
    resource = Resource(_make_privilege(), _make_check(set()))
    with pytest.raises(RuntimeError):
        resource.results
    with pytest.raises(RuntimeError):
        resource.permitted()


def test_check_errors_propagate():
    def check(role, action, controller_class):
        raise LookupError("no rules for ArticlesController")

    resource = Resource(_make_privilege(), check)
    with pytest.raises(LookupError, match="no rules"):
        resource.run_all()


def test_results_are_copies():
    resource = Resource(_make_privilege(), _make_check({"index"}))
    resource.run_all()
    resource.results["index"] = False
    assert resource.results["index"] is True
    assert resource.controller_class is ArticlesController
