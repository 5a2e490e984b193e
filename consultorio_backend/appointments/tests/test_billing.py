"""Tests for payment status calculation, payment recording and the billing list."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from django.test import SimpleTestCase, TestCase
from django.utils import timezone

from rest_framework import status

from consultorio_backend.appointments.exceptions import InvalidPaymentAmount
from consultorio_backend.appointments.models import Appointment, Procedure
from consultorio_backend.appointments.services.billing import payment_status_for, record_payment
from consultorio_backend.core.tests.helpers import RoleUsersMixin
from consultorio_backend.patients.models import Patient


class PaymentStatusTest(SimpleTestCase):
    def test_status_function(self):
        self.assertEqual(payment_status_for(Decimal("0"), Decimal("200.00")), "open")
        self.assertEqual(payment_status_for(Decimal("80.00"), Decimal("200.00")), "partial")
        self.assertEqual(payment_status_for(Decimal("200.00"), Decimal("200.00")), "paid")
        self.assertEqual(payment_status_for(Decimal("250.00"), Decimal("200.00")), "paid")

    def test_zero_total_is_paid(self):
        self.assertEqual(payment_status_for(Decimal("0"), Decimal("0")), "paid")


class RecordPaymentTest(RoleUsersMixin, TestCase):
    def setUp(self):
        self.create_role_users()
        patient = Patient.objects.create(name="Rita", age=60, phone="1")
        procedure = Procedure.objects.create(order=1, name="Restauração", value=Decimal("200.00"))
        self.appointment = Appointment.objects.create(
            patient=patient,
            procedure=procedure,
            datetime=timezone.now(),
            total_value=Decimal("200.00"),
        )

    def test_partial_then_paid(self):
        record_payment(self.appointment, "80.00", payment_date=date(2024, 5, 1), user=self.dentist)

        self.appointment.refresh_from_db()
        self.assertEqual(self.appointment.paid_amount, Decimal("80.00"))
        self.assertEqual(self.appointment.payment_status, "partial")
        self.assertEqual(self.appointment.payment_date, date(2024, 5, 1))

        record_payment(self.appointment, Decimal("120.00"), user=self.dentist)

        self.appointment.refresh_from_db()
        self.assertEqual(self.appointment.paid_amount, Decimal("200.00"))
        self.assertEqual(self.appointment.payment_status, "paid")
        self.assertEqual(self.appointment.payment_date, timezone.localdate())

    def test_invalid_amounts_change_nothing(self):
        for amount in (None, "", "abc", "0", 0, "-10", -5, "NaN", "Infinity", True):
            with self.assertRaises(InvalidPaymentAmount):
                record_payment(self.appointment, amount, user=self.dentist)

        self.appointment.refresh_from_db()
        self.assertEqual(self.appointment.paid_amount, Decimal("0.00"))
        self.assertEqual(self.appointment.payment_status, "open")
        self.assertIsNone(self.appointment.payment_date)

    def test_comma_decimal_separator_accepted(self):
        record_payment(self.appointment, "50,25", user=self.dentist)
        self.appointment.refresh_from_db()
        self.assertEqual(self.appointment.paid_amount, Decimal("50.25"))

    def test_payment_on_paid_appointment_is_allowed(self):
        record_payment(self.appointment, "200.00")
        record_payment(self.appointment, "10.00")

        self.appointment.refresh_from_db()
        self.assertEqual(self.appointment.paid_amount, Decimal("210.00"))
        self.assertEqual(self.appointment.payment_status, "paid")
        self.assertEqual(self.appointment.remaining, Decimal("-10.00"))

    def test_stale_instance_payments_add_up(self):
        stale = Appointment.objects.get(pk=self.appointment.pk)

        record_payment(self.appointment, "50.00")
        record_payment(stale, "30.00")

        self.appointment.refresh_from_db()
        self.assertEqual(self.appointment.paid_amount, Decimal("80.00"))

    def test_amount_beyond_field_range_rejected(self):
        for amount in ("100000000000", "100000000", "1e30"):
            with self.assertRaises(InvalidPaymentAmount):
                record_payment(self.appointment, amount)

        self.appointment.refresh_from_db()
        self.assertEqual(self.appointment.paid_amount, Decimal("0.00"))

    def test_running_total_beyond_field_range_rejected(self):
        record_payment(self.appointment, "99999990.00")

        with self.assertRaises(InvalidPaymentAmount):
            record_payment(self.appointment, "10.00")

        record_payment(self.appointment, "9.99")
        self.appointment.refresh_from_db()
        self.assertEqual(self.appointment.paid_amount, Decimal("99999999.99"))


class PaymentEndpointTest(RoleUsersMixin, TestCase):
    def setUp(self):
        self.create_role_users()
        self.patient = Patient.objects.create(name="Rita", age=60, phone="1")
        procedure = Procedure.objects.create(order=1, name="Restauração", value=Decimal("200.00"))
        self.appointment = Appointment.objects.create(
            patient=self.patient,
            procedure=procedure,
            datetime=timezone.now(),
            total_value=Decimal("200.00"),
        )
        self.url = f"/api/appointments/{self.appointment.pk}/payments/"

    def test_payment_sequence(self):
        client = self.as_user(self.dentist)

        response = client.post(self.url, {"amount": "80.00", "payment_date": "2024-05-01"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["payment_status"], "partial")
        self.assertEqual(response.data["remaining"], Decimal("120.00"))
        self.assertEqual(response.data["payment_date"], "2024-05-01")

        response = client.post(self.url, {"amount": 120}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["payment_status"], "paid")
        self.assertEqual(response.data["paid_amount"], Decimal("200.00"))
        self.assertEqual(response.data["remaining"], Decimal("0.00"))

    def test_invalid_amount_400(self):
        response = self.as_user(self.admin).post(self.url, {"amount": "-3"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("detail", response.data)
        self.assertEqual(response.data["amount"], "-3")
        self.appointment.refresh_from_db()
        self.assertEqual(self.appointment.paid_amount, Decimal("0.00"))

    def test_missing_amount_400(self):
        response = self.as_user(self.admin).post(self.url, {}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIsNone(response.data["amount"])

    def test_huge_amount_400_and_billing_still_readable(self):
        client = self.as_user(self.dentist)

        response = client.post(self.url, {"amount": "100000000000"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["amount"], "100000000000")
        self.appointment.refresh_from_db()
        self.assertEqual(self.appointment.paid_amount, Decimal("0.00"))
        self.assertIsNone(self.appointment.payment_date)
        self.assertEqual(client.get("/api/billing/").status_code, status.HTTP_200_OK)

    def test_receptionist_cannot_record_payments(self):
        response = self.as_user(self.receptionist).post(self.url, {"amount": "10"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_payment_on_missing_appointment_404(self):
        response = self.as_user(self.admin).post("/api/appointments/999999/payments/", {"amount": "10"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_billing_list_rows(self):
        record_payment(self.appointment, "80.00")

        response = self.as_user(self.dentist).get("/api/billing/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        row = response.data[0]
        self.assertEqual(row["patient_name"], "Rita")
        self.assertEqual(row["procedure_name"], "Restauração")
        self.assertEqual(row["total_value"], Decimal("200.00"))
        self.assertEqual(row["paid_amount"], Decimal("80.00"))
        self.assertEqual(row["remaining"], Decimal("120.00"))
        self.assertEqual(row["payment_status"], "partial")
