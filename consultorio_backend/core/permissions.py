"""Core permissions for RBAC (Role-Based Access Control).

This module provides the base permission class following the project's RBAC
pattern with read_roles/write_roles. Role sets come from
``consultorio_backend.core.navigation`` so that page visibility and endpoint
access never drift apart.

Standard roles: admin, dentist, receptionist
"""

from rest_framework.permissions import BasePermission, SAFE_METHODS

from consultorio_backend.core.navigation import ADMIN_ROLES, PAGE_USERS, PAGE_ROLES


class RBACPermission(BasePermission):
    """Base class for RBAC permissions with read_roles/write_roles pattern.

    Subclasses should define:
    - read_roles: set of role names that can perform GET/HEAD/OPTIONS
    - write_roles: set of role names that can perform POST/PUT/PATCH/DELETE

    Example:
        class MyPermission(RBACPermission):
            read_roles = {"admin", "dentist", "receptionist"}
            write_roles = {"admin"}
    """

    read_roles: frozenset = frozenset()
    write_roles: frozenset = frozenset()

    def _role_name(self, request):
        user = getattr(request, "user", None)
        role = getattr(user, "role", None)
        return getattr(role, "name", None)

    def has_permission(self, request, view):
        user = getattr(request, "user", None)
        if not user or not user.is_authenticated:
            return False

        role_name = self._role_name(request)
        if not role_name:
            return False

        if request.method in SAFE_METHODS:
            return role_name in self.read_roles

        return role_name in self.write_roles

    def has_object_permission(self, request, view, obj):
        # Default: same as has_permission
        return True


class UserAdminPermission(RBACPermission):
    """RBAC for the user management page.

    - admin: full access
    - everyone else: no access
    """

    read_roles = PAGE_ROLES[PAGE_USERS]
    write_roles = ADMIN_ROLES
