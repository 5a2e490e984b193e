from django.test import SimpleTestCase, TestCase

from rest_framework import status

from consultorio_backend.core.navigation import PAGES, can_open, pages_for_role
from consultorio_backend.core.tests.helpers import RoleUsersMixin


class PagesForRoleTest(SimpleTestCase):
    def test_admin_sees_every_page(self):
        self.assertEqual(pages_for_role("admin"), list(PAGES))

    def test_dentist_sees_clinical_pages_but_not_users(self):
        self.assertEqual(
            pages_for_role("dentist"),
            ["patients", "odontogram", "appointments", "procedures", "clinic", "consultation", "billing", "reports"],
        )

    def test_receptionist_sees_front_desk_pages_only(self):
        self.assertEqual(pages_for_role("receptionist"), ["patients", "odontogram", "appointments", "procedures"])

    def test_unknown_or_missing_role_sees_nothing(self):
        self.assertEqual(pages_for_role(None), [])
        self.assertEqual(pages_for_role(""), [])
        self.assertEqual(pages_for_role("janitor"), [])

    def test_can_open(self):
        self.assertTrue(can_open("admin", "users"))
        self.assertFalse(can_open("dentist", "users"))
        self.assertFalse(can_open("receptionist", "billing"))
        self.assertFalse(can_open("admin", "nonexistent"))
        self.assertFalse(can_open(None, "patients"))


class NavigationViewTest(RoleUsersMixin, TestCase):
    def setUp(self):
        self.create_role_users()

    def test_navigation_for_receptionist(self):
        response = self.as_user(self.receptionist).get("/api/navigation/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["pages"], ["patients", "odontogram", "appointments", "procedures"])

    def test_navigation_without_role_is_empty(self):
        response = self.as_user(self.no_role_user).get("/api/navigation/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["pages"], [])

    def test_hidden_pages_answer_403(self):
        client = self.as_user(self.receptionist)
        self.assertEqual(client.get("/api/users/").status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(client.get("/api/billing/").status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(client.get("/api/clinic/").status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(client.get("/api/reports/summary/").status_code, status.HTTP_403_FORBIDDEN)

    def test_user_without_role_is_denied_data(self):
        response = self.as_user(self.no_role_user).get("/api/patients/")
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
