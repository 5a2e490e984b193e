"""Role-based page navigation.

The client shows exactly one page at a time. Which pages a user may open is a
pure function of the user's role; the same role sets drive the RBAC permission
classes, so a page that is not listed here answers 403 on its endpoints.
"""

from __future__ import annotations

PAGE_PATIENTS = 'patients'
PAGE_ODONTOGRAM = 'odontogram'
PAGE_APPOINTMENTS = 'appointments'
PAGE_PROCEDURES = 'procedures'
PAGE_USERS = 'users'
PAGE_CLINIC = 'clinic'
PAGE_CONSULTATION = 'consultation'
PAGE_BILLING = 'billing'
PAGE_REPORTS = 'reports'

# Display order of the navigation bar.
PAGES: tuple[str, ...] = (
    PAGE_PATIENTS,
    PAGE_ODONTOGRAM,
    PAGE_APPOINTMENTS,
    PAGE_PROCEDURES,
    PAGE_USERS,
    PAGE_CLINIC,
    PAGE_CONSULTATION,
    PAGE_BILLING,
    PAGE_REPORTS,
)

ALL_ROLES = frozenset({'admin', 'dentist', 'receptionist'})
CLINICAL_ROLES = frozenset({'admin', 'dentist'})
ADMIN_ROLES = frozenset({'admin'})

PAGE_ROLES: dict[str, frozenset[str]] = {
    PAGE_PATIENTS: ALL_ROLES,
    PAGE_ODONTOGRAM: ALL_ROLES,
    PAGE_APPOINTMENTS: ALL_ROLES,
    PAGE_PROCEDURES: ALL_ROLES,
    PAGE_USERS: ADMIN_ROLES,
    PAGE_CLINIC: CLINICAL_ROLES,
    PAGE_CONSULTATION: CLINICAL_ROLES,
    PAGE_BILLING: CLINICAL_ROLES,
    PAGE_REPORTS: CLINICAL_ROLES,
}


def pages_for_role(role_name: str | None) -> list[str]:
    """Return the pages visible for ``role_name`` in navigation order."""
    if not role_name:
        return []
    return [page for page in PAGES if role_name in PAGE_ROLES[page]]


def can_open(role_name: str | None, page: str) -> bool:
    return bool(role_name) and role_name in PAGE_ROLES.get(page, frozenset())
