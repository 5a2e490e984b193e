"""Procedure catalog maintenance."""

from __future__ import annotations

import logging

from django.db import transaction

from consultorio_backend.appointments.models import Procedure
from consultorio_backend.core.utils import log_patient_action

logger = logging.getLogger(__name__)


def delete_procedure(procedure: Procedure, *, user=None) -> int:
    """Delete ``procedure`` and every appointment that references it.

    All-or-nothing. Returns the number of appointments removed.
    """
    procedure_id = procedure.pk
    with transaction.atomic():
        patient_ids = list(
            procedure.appointments.values_list('patient_id', flat=True).distinct()
        )
        _total, per_model = procedure.delete()

    removed = per_model.get('appointments.Appointment', 0)
    logger.info('Procedure %s deleted (cascaded appointments: %s)', procedure_id, removed)
    for patient_id in patient_ids:
        log_patient_action(
            user,
            'appointments_deleted_with_procedure',
            patient_id=patient_id,
            meta={'procedure_id': procedure_id},
        )
    return removed
