"""
Patient services: cascading delete and odontogram edits.

Views delegate here so both odontogram entry points (patient page and
consultation page) share one implementation.
"""

from __future__ import annotations

import logging
from typing import Mapping

from django.db import transaction

from consultorio_backend.core.utils import log_patient_action
from consultorio_backend.patients.models import Patient
from consultorio_backend.patients.odontogram import Odontogram, validate_code, validate_tooth

logger = logging.getLogger(__name__)


def delete_patient(patient: Patient, *, user=None) -> int:
    """Delete ``patient`` together with all of its appointments.

    Runs in one transaction: either the patient and every dependent
    appointment are gone, or nothing is. Returns the number of appointments
    removed.
    """
    patient_id = patient.pk
    with transaction.atomic():
        _total, per_model = patient.delete()

    removed = per_model.get('appointments.Appointment', 0)
    logger.info('Patient %s deleted (cascaded appointments: %s)', patient_id, removed)
    log_patient_action(
        user,
        'patient_deleted',
        patient_id=patient_id,
        meta={'appointments_deleted': removed},
    )
    return removed


def set_tooth_status(patient: Patient, tooth: str, code: str, *, user=None, source: str = 'patient') -> Patient:
    """Set one tooth's status and persist the odontogram.

    The patient row is locked while the map is rewritten so that concurrent
    edits of different teeth are all kept. ``patient`` is updated in place
    with the stored map.
    """
    tooth = validate_tooth(tooth)
    code = validate_code(code, tooth=tooth)

    with transaction.atomic():
        locked = Patient.objects.select_for_update().get(pk=patient.pk)
        chart = Odontogram.for_patient(locked)
        chart.set(tooth, code)
        locked.odontogram = chart.to_dict()
        locked.save(update_fields=['odontogram', 'updated_at'])

    patient.odontogram = locked.odontogram
    logger.debug('Odontogram patient=%s tooth=%s code=%r (%s)', patient.pk, tooth, code, source)
    log_patient_action(
        user,
        'odontogram_updated',
        patient_id=patient.pk,
        meta={'tooth': tooth, 'code': code, 'source': source},
    )
    return patient


def replace_odontogram(patient: Patient, entries: Mapping[str, str], *, user=None) -> Patient:
    """Overwrite the whole odontogram with ``entries`` (validated first)."""
    chart = Odontogram(entries)

    with transaction.atomic():
        locked = Patient.objects.select_for_update().get(pk=patient.pk)
        locked.odontogram = chart.to_dict()
        locked.save(update_fields=['odontogram', 'updated_at'])

    patient.odontogram = locked.odontogram
    log_patient_action(
        user,
        'odontogram_replaced',
        patient_id=patient.pk,
        meta={'teeth': sorted(patient.odontogram)},
    )
    return patient
