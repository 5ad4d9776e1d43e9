"""permitspec — one-line assertions for role permissions on RESTful controllers."""

from permitspec.assertions import assert_not_permitted, assert_permitted
from permitspec.behaviors import (
    BEHAVIORS,
    UnknownBehaviorError,
    helper_names,
    humanize,
    resolve,
)
from permitspec.matcher import HavePermissionFor, have_permission_for
from permitspec.models import (
    PermissionCheck,
    Prefix,
    Privilege,
    ResolvedBehavior,
    Verdict,
)
from permitspec.resource import Resource

__version__ = "0.1.0"

__all__ = [
    "have_permission_for",
    "HavePermissionFor",
    "assert_permitted",
    "assert_not_permitted",
    "resolve",
    "humanize",
    "helper_names",
    "BEHAVIORS",
    "UnknownBehaviorError",
    "Resource",
    "Privilege",
    "ResolvedBehavior",
    "PermissionCheck",
    "Prefix",
    "Verdict",
]
