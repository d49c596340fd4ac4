"""Role-based visibility rules for report items.

Administrators see every item, with high-value items flagged as priority.
Standard users only see items up to the visibility limit. Any other role
sees nothing."""
import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional

from ...core import config
from ...core.errors import UnknownRoleError
from .schemas import AnnotatedItem, Item, User, Visibility, numeric_value

logger = logging.getLogger(__name__)

ROLE_ADMIN = "ADMIN"
ROLE_USER = "USER"

_ROLE_VISIBILITY = {
    ROLE_ADMIN: Visibility.FULL,
    ROLE_USER: Visibility.LIMITED,
}


@dataclass(frozen=True)
class ReportPolicy:
    priority_threshold: float = field(default_factory=lambda: config.PRIORITY_THRESHOLD)
    visibility_limit: float = field(default_factory=lambda: config.VISIBILITY_LIMIT)


def resolve_visibility(role: Any, strict: bool = False) -> Visibility:
    """
    Maps a role identifier to the visibility it grants.

    Roles are compared exactly, so "admin" is not the same as "ADMIN".

    Args:
        role: The user's role identifier, possibly None or unrecognized
        strict: Raise instead of denying when the role is unrecognized

    Returns:
        Visibility: FULL for administrators, LIMITED for standard users,
        DENIED for anything else.

    Raises:
        UnknownRoleError: If strict is set and the role is unrecognized.
    """
    visibility = _ROLE_VISIBILITY.get(role, Visibility.DENIED) if isinstance(role, str) else Visibility.DENIED
    if visibility is Visibility.DENIED and strict:
        raise UnknownRoleError(role)
    return visibility


def _is_priority(item: Item, threshold) -> bool:
    value = numeric_value(item.value)
    return value is not None and value > threshold


def _within_limit(item: Item, limit) -> bool:
    value = numeric_value(item.value)
    return value is not None and value <= limit


def filter_items(
    visibility: Visibility, items: Iterable[Item], policy: Optional[ReportPolicy] = None
) -> List[AnnotatedItem]:
    """Applies an already resolved visibility to the items, preserving order."""
    policy = policy or ReportPolicy()

    if visibility is Visibility.FULL:
        return [
            AnnotatedItem.from_item(item, priority=_is_priority(item, policy.priority_threshold))
            for item in items
        ]
    if visibility is Visibility.LIMITED:
        return [
            AnnotatedItem.from_item(item)
            for item in items
            if _within_limit(item, policy.visibility_limit)
        ]
    return []


def select_visible(
    user: User, items: Iterable[Item], policy: Optional[ReportPolicy] = None, strict: bool = False
) -> List[AnnotatedItem]:
    """
    Returns the items the user is permitted to see.

    Every returned item is a new AnnotatedItem; the input items are never
    modified. An unrecognized role yields an empty list unless strict is set.
    """
    visibility = resolve_visibility(user.role, strict=strict)
    visible = filter_items(visibility, items, policy)
    logger.debug(f"Role {user.role!r} resolved to {visibility.value}, {len(visible)} item(s) visible")
    return visible
