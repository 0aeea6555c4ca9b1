"""
Capability tags checked by the permission gate.

Permissions are ``"<resource>:<action>"`` strings stored on each user. The
set of valid tags is closed: anything outside :class:`Permission` is
rejected when a user is created or updated.
"""
from enum import Enum
from typing import Dict, FrozenSet, Iterable, List

from .security import UserRole


class Permission(str, Enum):
    PATIENT_READ = "patient:read"
    PATIENT_CREATE = "patient:create"
    PATIENT_UPDATE = "patient:update"
    PATIENT_DELETE = "patient:delete"

    APPOINTMENT_READ = "appointment:read"
    APPOINTMENT_CREATE = "appointment:create"
    APPOINTMENT_UPDATE = "appointment:update"
    APPOINTMENT_DELETE = "appointment:delete"

    AVAILABILITY_READ = "availability:read"
    AVAILABILITY_CREATE = "availability:create"
    AVAILABILITY_UPDATE = "availability:update"
    AVAILABILITY_DELETE = "availability:delete"


_ALL = frozenset(Permission)

# Granted on creation when an administrator does not pick permissions explicitly
ROLE_DEFAULT_PERMISSIONS: Dict[UserRole, FrozenSet[Permission]] = {
    UserRole.ADMIN: _ALL,
    UserRole.STAFF: frozenset({
        Permission.PATIENT_READ,
        Permission.PATIENT_CREATE,
        Permission.PATIENT_UPDATE,
        Permission.PATIENT_DELETE,
        Permission.APPOINTMENT_READ,
        Permission.APPOINTMENT_CREATE,
        Permission.APPOINTMENT_UPDATE,
        Permission.APPOINTMENT_DELETE,
        Permission.AVAILABILITY_READ,
    }),
    UserRole.DOCTOR: frozenset({
        Permission.PATIENT_READ,
        Permission.PATIENT_UPDATE,
        Permission.APPOINTMENT_READ,
        Permission.APPOINTMENT_CREATE,
        Permission.APPOINTMENT_UPDATE,
        Permission.AVAILABILITY_READ,
    }),
}


def default_permissions(role: UserRole) -> List[str]:
    """Sorted permission strings granted to a role by default."""
    return sorted(p.value for p in ROLE_DEFAULT_PERMISSIONS.get(UserRole(role), frozenset()))


def normalize_permissions(permissions: Iterable) -> List[str]:
    """Deduplicate and sort permissions into their stored string form."""
    return sorted({Permission(p).value for p in permissions})


def has_permission(user, permission: Permission) -> bool:
    """Admins pass every check; everyone else needs the exact tag."""
    if user.is_admin:
        return True
    return Permission(permission).value in (user.permissions or [])
