from consultorio_backend.core.navigation import PAGE_REPORTS, PAGE_ROLES
from consultorio_backend.core.permissions import RBACPermission


class ReportsPermission(RBACPermission):
    """RBAC for reports (read-only).

    - admin, dentist: read
    - receptionist: no access
    """

    read_roles = PAGE_ROLES[PAGE_REPORTS]
    write_roles = frozenset()
