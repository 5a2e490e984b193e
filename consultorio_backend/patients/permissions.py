from consultorio_backend.core.navigation import PAGE_ODONTOGRAM, PAGE_PATIENTS, PAGE_ROLES
from consultorio_backend.core.permissions import RBACPermission


class PatientPermission(RBACPermission):
    """RBAC for Patient endpoints.

    - admin, dentist, receptionist: full access (read + write)
    """

    read_roles = PAGE_ROLES[PAGE_PATIENTS]
    write_roles = PAGE_ROLES[PAGE_PATIENTS]


class OdontogramPermission(RBACPermission):
    """RBAC for the standalone odontogram page (same roles as patients)."""

    read_roles = PAGE_ROLES[PAGE_ODONTOGRAM]
    write_roles = PAGE_ROLES[PAGE_ODONTOGRAM]
