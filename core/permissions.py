"""
Permission classes keyed on the account's active role.
"""
from rest_framework.permissions import BasePermission

CLINICAL_ROLES = {"doctor", "admin"}


class IsAdminRole(BasePermission):
    """Allow access only while the account acts as an administrator."""
    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        user = getattr(request, "user", None)
        return bool(user and user.is_authenticated and getattr(user, "active_role", None) == "admin")


class IsClinicalRole(BasePermission):
    """Doctors and administrators."""
    def has_permission(self, request, view) -> bool:
        user = getattr(request, "user", None)
        return bool(user and user.is_authenticated and getattr(user, "active_role", None) in CLINICAL_ROLES)
