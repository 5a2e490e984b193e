"""Shared fixtures for API tests: the three roles and one user per role."""

from __future__ import annotations

from rest_framework.test import APIClient

from consultorio_backend.core.models import Role, User

PASSWORD = "SecurePass123!"


class RoleUsersMixin:
    """setUp helper creating roles, one user per role and an APIClient."""

    def create_role_users(self):
        self.role_admin, _ = Role.objects.get_or_create(name=Role.ADMIN, defaults={"label": "Admin"})
        self.role_dentist, _ = Role.objects.get_or_create(name=Role.DENTIST, defaults={"label": "Dentista"})
        self.role_receptionist, _ = Role.objects.get_or_create(
            name=Role.RECEPTIONIST,
            defaults={"label": "Recepcionista"},
        )

        self.admin = User.objects.create_user(username="admin_test", password=PASSWORD, role=self.role_admin)
        self.dentist = User.objects.create_user(username="dentist_test", password=PASSWORD, role=self.role_dentist)
        self.receptionist = User.objects.create_user(
            username="receptionist_test",
            password=PASSWORD,
            role=self.role_receptionist,
        )
        self.no_role_user = User.objects.create_user(username="norole_test", password=PASSWORD)

        self.client = APIClient()
        self.client.defaults["HTTP_HOST"] = "localhost"

    def as_user(self, user):
        self.client.force_authenticate(user=user)
        return self.client
