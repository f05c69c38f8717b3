"""
Domain: Role-based access control for dashboard staff.

Rules implemented here:
- Section access is a static mapping of section name -> set of permitted roles.
- Fine-grained actions are a static mapping of role -> set of actions; the
  admin role holds the wildcard "*".
- Unknown sections, actions, and roles are denied (the sets do not contain them).

Everything in this module is compile-time data and pure lookups.
"""

from __future__ import annotations

from enum import Enum
from typing import FrozenSet, Iterable, List, Mapping, Optional


class AdminRole(str, Enum):
    ADMIN = "admin"
    MANAGER = "manager"
    SALES = "sales"
    OPERATIONS = "operations"

    @property
    def display_name(self) -> str:
        return _ROLE_DISPLAY_NAMES[self]


_ROLE_DISPLAY_NAMES: Mapping[AdminRole, str] = {
    AdminRole.ADMIN: "Administrator",
    AdminRole.MANAGER: "Manager",
    AdminRole.SALES: "Sales",
    AdminRole.OPERATIONS: "Operations",
}

WILDCARD = "*"

_ALL_ROLES: FrozenSet[AdminRole] = frozenset(AdminRole)
_SALES_SIDE = frozenset({AdminRole.ADMIN, AdminRole.MANAGER, AdminRole.SALES})
_OPERATIONS_SIDE = frozenset({AdminRole.ADMIN, AdminRole.MANAGER, AdminRole.OPERATIONS})

# Order matters: it is the navigation order.
SECTION_PERMISSIONS: Mapping[str, FrozenSet[AdminRole]] = {
    "dashboard": _ALL_ROLES,
    "clients": _SALES_SIDE,
    "clients_edit": _SALES_SIDE,
    "quotes": _SALES_SIDE,
    "quotes_edit": _SALES_SIDE,
    "orders": _OPERATIONS_SIDE,
    "orders_edit": _OPERATIONS_SIDE,
    "deliveries": _OPERATIONS_SIDE,
    "deliveries_edit": _OPERATIONS_SIDE,
    "team": frozenset({AdminRole.ADMIN, AdminRole.MANAGER}),
    "settings": frozenset({AdminRole.ADMIN}),
    "notifications": _ALL_ROLES,
}

# Sections that appear as navigation entries (the *_edit entries gate actions only).
NAVIGATION_SECTIONS: List[str] = [
    "dashboard",
    "clients",
    "quotes",
    "orders",
    "deliveries",
    "team",
    "settings",
    "notifications",
]

ROLE_ACTIONS: Mapping[AdminRole, FrozenSet[str]] = {
    AdminRole.ADMIN: frozenset({WILDCARD}),
    AdminRole.MANAGER: frozenset({
        "view_clients",
        "edit_clients",
        "delete_clients",
        "view_orders",
        "edit_orders",
        "create_orders",
        "view_quotes",
        "edit_quotes",
        "create_quotes",
        "send_quotes",
        "view_reports",
        "manage_team",
        "view_settings",
        "manage_deliveries",
    }),
    AdminRole.SALES: frozenset({
        "view_clients",
        "edit_clients",
        "view_orders",
        "view_quotes",
        "edit_quotes",
        "create_quotes",
        "send_quotes",
    }),
    AdminRole.OPERATIONS: frozenset({
        "view_clients",
        "view_orders",
        "edit_orders",
        "view_quotes",
        "manage_deliveries",
        "edit_deliveries",
    }),
}


def can_access_section(role: Optional[AdminRole], section: str) -> bool:
    """True iff the section exists and lists the role."""

    if role is None:
        return False
    return role in SECTION_PERMISSIONS.get(section, frozenset())


def can_perform_action(role: Optional[AdminRole], action: str) -> bool:
    if role is None:
        return False
    permissions = ROLE_ACTIONS.get(role, frozenset())
    return WILDCARD in permissions or action in permissions


def has_role(role: Optional[AdminRole], required_roles: Iterable[AdminRole]) -> bool:
    return role is not None and role in set(required_roles)


def is_allowed_email(email: str, domain: str) -> bool:
    """Only addresses on the company domain may sign in to the dashboard."""

    return email.lower().endswith(f"@{domain.lower()}")


def role_display_name(role: AdminRole) -> str:
    return role.display_name


def visible_sections(role: Optional[AdminRole]) -> List[str]:
    """Navigation sections the role can open, in navigation order."""

    return [section for section in NAVIGATION_SECTIONS if can_access_section(role, section)]


__all__ = [
    "AdminRole",
    "NAVIGATION_SECTIONS",
    "ROLE_ACTIONS",
    "SECTION_PERMISSIONS",
    "WILDCARD",
    "can_access_section",
    "can_perform_action",
    "has_role",
    "is_allowed_email",
    "role_display_name",
    "visible_sections",
]
