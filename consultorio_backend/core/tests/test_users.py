"""Tests for user management (/api/users/), admin only."""

from __future__ import annotations

from django.test import TestCase

from rest_framework import status

from consultorio_backend.core.models import User
from consultorio_backend.core.tests.helpers import RoleUsersMixin


class UserManagementTest(RoleUsersMixin, TestCase):
    def setUp(self):
        self.create_role_users()

    def test_admin_lists_users(self):
        response = self.as_user(self.admin).get("/api/users/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        usernames = {u["username"] for u in response.data}
        self.assertIn("dentist_test", usernames)
        self.assertNotIn("password", response.data[0])

    def test_non_admin_cannot_list_or_create(self):
        for user in (self.dentist, self.receptionist):
            client = self.as_user(user)
            self.assertEqual(client.get("/api/users/").status_code, status.HTTP_403_FORBIDDEN)
            response = client.post(
                "/api/users/",
                {"username": "x_user", "password": "LongEnough1", "role": "admin"},
                format="json",
            )
            self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_admin_creates_user_with_hashed_password(self):
        response = self.as_user(self.admin).post(
            "/api/users/",
            {"username": "new_recep", "password": "LongEnough1", "role": "receptionist"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["role"]["name"], "receptionist")
        user = User.objects.get(username="new_recep")
        self.assertNotEqual(user.password, "LongEnough1")
        self.assertTrue(user.check_password("LongEnough1"))

    def test_duplicate_username_rejected(self):
        response = self.as_user(self.admin).post(
            "/api/users/",
            {"username": "dentist_test", "password": "LongEnough1", "role": "dentist"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("username", response.data)
        self.assertEqual(User.objects.filter(username="dentist_test").count(), 1)

    def test_unknown_role_rejected(self):
        response = self.as_user(self.admin).post(
            "/api/users/",
            {"username": "someone", "password": "LongEnough1", "role": "janitor"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("role", response.data)

    def test_admin_deletes_other_user(self):
        response = self.as_user(self.admin).delete(f"/api/users/{self.receptionist.pk}/")

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(User.objects.filter(pk=self.receptionist.pk).exists())

    def test_admin_cannot_delete_self(self):
        response = self.as_user(self.admin).delete(f"/api/users/{self.admin.pk}/")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertTrue(User.objects.filter(pk=self.admin.pk).exists())

    def test_delete_missing_user_404(self):
        response = self.as_user(self.admin).delete("/api/users/999999/")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
