"""Tests for the ``seed`` management command."""

from __future__ import annotations

import os
from io import StringIO
from unittest.mock import patch

from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.test import TestCase

from consultorio_backend.appointments.models import Appointment, Procedure
from consultorio_backend.core.models import Role
from consultorio_backend.core.seeders import DEMO_PASSWORD
from consultorio_backend.patients.models import Patient

User = get_user_model()

SEED_ENV = {"SEED_ADMIN_USERNAME": "seed_admin", "SEED_ADMIN_PASSWORD": "SeedAdmin123!"}


@patch.dict(os.environ, SEED_ENV)
class SeedCommandTest(TestCase):
    def _seed(self, *args):
        call_command("seed", *args, stdout=StringIO())

    def _counts(self):
        return {
            "roles": Role.objects.count(),
            "users": User.objects.count(),
            "patients": Patient.objects.count(),
            "procedures": Procedure.objects.count(),
            "appointments": Appointment.objects.count(),
        }

    def test_seed_creates_data(self):
        self._seed()

        counts = self._counts()
        self.assertEqual(counts["roles"], 3)
        self.assertEqual(counts["users"], 4)
        self.assertEqual(counts["patients"], 6)
        self.assertEqual(counts["procedures"], 8)
        self.assertGreater(counts["appointments"], 0)

        admin = User.objects.get(username="seed_admin")
        self.assertTrue(admin.is_superuser)
        self.assertEqual(admin.role.name, Role.ADMIN)
        self.assertTrue(admin.check_password("SeedAdmin123!"))
        self.assertTrue(User.objects.get(username="recepcao").check_password(DEMO_PASSWORD))

    def test_seed_twice_creates_no_duplicates(self):
        self._seed()
        first = self._counts()

        self._seed()

        self.assertEqual(self._counts(), first)
        self.assertEqual(User.objects.filter(username="seed_admin").count(), 1)

    def test_seeded_appointments_have_consistent_payment_status(self):
        self._seed()

        for appointment in Appointment.objects.all():
            self.assertEqual(appointment.total_value, appointment.procedure.value)
            if appointment.paid_amount >= appointment.total_value:
                self.assertEqual(appointment.payment_status, Appointment.STATUS_PAID)
            elif appointment.paid_amount > 0:
                self.assertEqual(appointment.payment_status, Appointment.STATUS_PARTIAL)
            else:
                self.assertEqual(appointment.payment_status, Appointment.STATUS_OPEN)

    def test_no_demo_seeds_only_roles_admin_and_catalog(self):
        self._seed("--no-demo")

        counts = self._counts()
        self.assertEqual(counts["roles"], 3)
        self.assertEqual(counts["users"], 1)
        self.assertEqual(counts["patients"], 0)
        self.assertEqual(counts["procedures"], 8)
        self.assertEqual(counts["appointments"], 0)

    def test_flush_rebuilds_demo_data_and_keeps_superuser(self):
        self._seed()
        Patient.objects.create(name="Extra", age=20, phone="1")

        self._seed("--flush")

        self.assertEqual(Patient.objects.count(), 6)
        self.assertFalse(Patient.objects.filter(name="Extra").exists())
        self.assertTrue(User.objects.filter(username="seed_admin", is_superuser=True).exists())
