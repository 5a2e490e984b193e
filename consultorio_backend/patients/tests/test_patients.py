"""Tests for Patient CRUD endpoints.

Tests cover:
- List/Create (GET/POST /api/patients/)
- Retrieve/Update/Delete (GET/PUT/PATCH/DELETE /api/patients/<pk>/)
- Deleting a patient removes its appointments and nothing else
- RBAC: every role may manage patients, unauthenticated may not
- Audit logging via log_patient_action
"""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal
from unittest.mock import patch

from django.test import TestCase
from django.utils import timezone

from rest_framework import status

from consultorio_backend.appointments.models import Appointment, Procedure
from consultorio_backend.core.tests.helpers import RoleUsersMixin
from consultorio_backend.patients.models import Patient
from consultorio_backend.patients.services import delete_patient


class PatientCRUDTest(RoleUsersMixin, TestCase):
    def setUp(self):
        self.create_role_users()
        self.patient = Patient.objects.create(name="Maria Souza", age=40, phone="(11) 91234-5678")

    def test_list_requires_authentication(self):
        response = self.client.get("/api/patients/")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_every_role_can_list(self):
        for user in (self.admin, self.dentist, self.receptionist):
            response = self.as_user(user).get("/api/patients/")
            self.assertEqual(response.status_code, status.HTTP_200_OK)
            self.assertEqual(response.data[0]["name"], "Maria Souza")

    @patch("consultorio_backend.patients.views.log_patient_action")
    def test_create_patient(self, mock_log):
        response = self.as_user(self.receptionist).post(
            "/api/patients/",
            {"name": "  João Pedro ", "age": 12, "phone": "(21) 90000-0000", "notes": "alergia a dipirona"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["name"], "João Pedro")
        self.assertEqual(response.data["odontogram"], {})
        mock_log.assert_called_once()
        self.assertEqual(mock_log.call_args[0][1], "patient_created")

    def test_create_rejects_negative_age(self):
        response = self.as_user(self.admin).post(
            "/api/patients/",
            {"name": "X", "age": -1, "phone": "1"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("age", response.data)

    def test_create_requires_name_and_phone(self):
        response = self.as_user(self.admin).post(
            "/api/patients/",
            {"name": "   ", "age": 30},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("name", response.data)
        self.assertIn("phone", response.data)

    def test_retrieve_patient(self):
        response = self.as_user(self.dentist).get(f"/api/patients/{self.patient.pk}/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["id"], self.patient.pk)

    def test_retrieve_missing_patient_404(self):
        response = self.as_user(self.dentist).get("/api/patients/999999/")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_patch_updates_fields_and_keeps_odontogram(self):
        self.patient.odontogram = {"18": "C"}
        self.patient.save()

        response = self.as_user(self.receptionist).patch(
            f"/api/patients/{self.patient.pk}/",
            {"phone": "(11) 95555-5555"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.patient.refresh_from_db()
        self.assertEqual(self.patient.phone, "(11) 95555-5555")
        self.assertEqual(self.patient.odontogram, {"18": "C"})

    def test_put_replaces_fields(self):
        response = self.as_user(self.admin).put(
            f"/api/patients/{self.patient.pk}/",
            {"name": "Maria S.", "age": 41, "phone": "0", "notes": ""},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["age"], 41)


class PatientCascadeDeleteTest(RoleUsersMixin, TestCase):
    def setUp(self):
        self.create_role_users()
        self.procedure = Procedure.objects.create(order=1, name="Limpeza", value=Decimal("150.00"))
        self.patient = Patient.objects.create(name="P1", age=30, phone="1")
        self.other = Patient.objects.create(name="P2", age=31, phone="2")

        now = timezone.now()
        for i in range(3):
            Appointment.objects.create(
                patient=self.patient,
                procedure=self.procedure,
                datetime=now + timedelta(days=i),
                total_value=self.procedure.value,
            )
        self.other_appointment = Appointment.objects.create(
            patient=self.other,
            procedure=self.procedure,
            datetime=now,
            total_value=self.procedure.value,
        )

    def test_delete_patient_removes_its_appointments_only(self):
        response = self.as_user(self.receptionist).delete(f"/api/patients/{self.patient.pk}/")

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Patient.objects.filter(pk=self.patient.pk).exists())
        self.assertFalse(Appointment.objects.filter(patient_id=self.patient.pk).exists())
        self.assertEqual(list(Appointment.objects.all()), [self.other_appointment])
        self.assertTrue(Patient.objects.filter(pk=self.other.pk).exists())

    def test_delete_patient_service_returns_removed_count(self):
        removed = delete_patient(self.patient, user=self.admin)
        self.assertEqual(removed, 3)

