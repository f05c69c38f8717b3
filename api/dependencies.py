"""
Shared request dependencies.

The caller's role arrives in the `X-Admin-Role` header (the sign-in flow that
resolves it lives in front of this API). A missing or unknown role is 401; a
known role without access to the requested section is 403.
"""

from datetime import datetime
from functools import lru_cache
from typing import Callable, Optional

from fastapi import Depends, Header, HTTPException

from config.settings import Settings, get_settings
from domain.normalization import normalize_role
from domain.permissions import AdminRole, can_access_section
from domain.time import utc_now
from repositories import OperationsStore, create_store


@lru_cache(maxsize=1)
def _shared_store() -> OperationsStore:
    return create_store(get_settings())


def get_store() -> OperationsStore:
    """Process-wide operations store. Tests override this dependency."""
    return _shared_store()


def get_now() -> datetime:
    return utc_now()


def get_role(x_admin_role: Optional[str] = Header(None)) -> AdminRole:
    role = normalize_role(x_admin_role)
    if role is None:
        raise HTTPException(
            status_code=401,
            detail="Missing or unknown admin role"
        )
    return role


def get_user_id(x_admin_user: Optional[str] = Header(None)) -> Optional[str]:
    return x_admin_user or None


def require_section(section: str) -> Callable[..., AdminRole]:
    """Dependency factory: the caller's role, provided it can open `section`."""

    def dependency(role: AdminRole = Depends(get_role)) -> AdminRole:
        if not can_access_section(role, section):
            raise HTTPException(
                status_code=403,
                detail=f"Role '{role.value}' cannot access section '{section}'"
            )
        return role

    return dependency


__all__ = [
    "Settings",
    "get_now",
    "get_role",
    "get_settings",
    "get_store",
    "get_user_id",
    "require_section",
]
