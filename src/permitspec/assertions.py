"""Assertion helpers that report matcher failures as ``AssertionError``."""

from __future__ import annotations

from typing import Any

from permitspec.matcher import HavePermissionFor


def assert_permitted(matcher: HavePermissionFor, controller: Any) -> HavePermissionFor:
    """Assert the matcher matches *controller*.

    Partial outcomes fail with the per-action results in the message.
    """
    if not matcher.matches(controller):
        raise AssertionError(matcher.failure_message)
    return matcher


def assert_not_permitted(matcher: HavePermissionFor, controller: Any) -> HavePermissionFor:
    """Assert the exact opposite outcome; partial outcomes fail here too."""
    if not matcher.does_not_match(controller):
        raise AssertionError(matcher.failure_message_when_negated)
    return matcher
