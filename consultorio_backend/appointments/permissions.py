from consultorio_backend.core.navigation import (
    PAGE_APPOINTMENTS,
    PAGE_BILLING,
    PAGE_CLINIC,
    PAGE_CONSULTATION,
    PAGE_PROCEDURES,
    PAGE_ROLES,
)
from consultorio_backend.core.permissions import RBACPermission


class ProcedurePermission(RBACPermission):
    """RBAC for the procedure catalog.

    - admin, dentist, receptionist: full access
    """

    read_roles = PAGE_ROLES[PAGE_PROCEDURES]
    write_roles = PAGE_ROLES[PAGE_PROCEDURES]


class AppointmentPermission(RBACPermission):
    """RBAC for appointments.

    - admin, dentist, receptionist: full access
    """

    read_roles = PAGE_ROLES[PAGE_APPOINTMENTS]
    write_roles = PAGE_ROLES[PAGE_APPOINTMENTS]


class BillingPermission(RBACPermission):
    """RBAC for billing (list + recording payments).

    - admin, dentist: full access
    - receptionist: no access
    """

    read_roles = PAGE_ROLES[PAGE_BILLING]
    write_roles = PAGE_ROLES[PAGE_BILLING]


class ClinicPermission(RBACPermission):
    """RBAC for the clinic waiting list (read-only)."""

    read_roles = PAGE_ROLES[PAGE_CLINIC]
    write_roles = frozenset()


class ConsultationPermission(RBACPermission):
    """RBAC for the consultation page (anamnesis + odontogram)."""

    read_roles = PAGE_ROLES[PAGE_CONSULTATION]
    write_roles = PAGE_ROLES[PAGE_CONSULTATION]
