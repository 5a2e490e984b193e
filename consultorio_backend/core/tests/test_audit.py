from unittest.mock import patch

from django.test import TestCase

from consultorio_backend.core.models import AuditLog
from consultorio_backend.core.tests.helpers import RoleUsersMixin
from consultorio_backend.core.utils import log_patient_action


class AuditLogTest(RoleUsersMixin, TestCase):
    def setUp(self):
        self.create_role_users()

    def test_log_patient_action_records_role(self):
        log_patient_action(self.dentist, "patient_view", patient_id=7, meta={"x": 1})

        entry = AuditLog.objects.get()
        self.assertEqual(entry.user, self.dentist)
        self.assertEqual(entry.role_name, "dentist")
        self.assertEqual(entry.action, "patient_view")
        self.assertEqual(entry.patient_id, 7)
        self.assertEqual(entry.meta, {"x": 1})

    def test_log_patient_action_never_raises(self):
        with patch.object(AuditLog.objects, "create", side_effect=RuntimeError("db down")):
            with self.assertLogs("consultorio_backend.core.utils", level="ERROR"):
                log_patient_action(self.admin, "patient_view", patient_id=1)

        self.assertEqual(AuditLog.objects.count(), 0)
