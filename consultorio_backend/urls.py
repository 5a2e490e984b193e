"""Consultório URL Configuration.

API routes:
    /api/health/        - Health check (core)
    /api/auth/          - Authentication (core)
    /api/navigation/    - Pages visible for the caller's role (core)
    /api/users/         - User management, admin only (core)
    /api/patients/      - Patients + odontogram (patients)
    /api/procedures/    - Procedure catalog (appointments)
    /api/appointments/  - Appointments + payments (appointments)
    /api/billing/       - Billing rows (appointments)
    /api/clinic/        - Waiting list (appointments)
    /api/consultations/ - Consultation page (appointments)
    /api/reports/       - Reports (reports)
"""

from django.contrib import admin
from django.http import HttpResponse
from django.urls import include, path


def root(request):
    """Plain-text root response; doubles as a trivial liveness check."""
    return HttpResponse("Consultório backend is running.")


urlpatterns = [
    path("", root, name="root"),
    path("admin/", admin.site.urls),

    path("api/", include("consultorio_backend.core.urls")),
    path("api/", include("consultorio_backend.patients.urls")),
    path("api/", include("consultorio_backend.appointments.urls")),
    path("api/", include("consultorio_backend.reports.urls")),
]
