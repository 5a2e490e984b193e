"""
Billing service for appointments.

An appointment's payment state is derived from two amounts only:

    paid_amount >= total_value  -> paid
    paid_amount <= 0            -> open
    otherwise                   -> partial

``record_payment`` is the only way money is added to an appointment. It
locks the appointment row, so concurrent payments on the same appointment
are applied one after the other and none is lost.
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any

from django.db import transaction
from django.utils import timezone

from consultorio_backend.appointments.exceptions import InvalidPaymentAmount
from consultorio_backend.appointments.models import Appointment
from consultorio_backend.core.utils import log_patient_action

logger = logging.getLogger(__name__)

CENT = Decimal('0.01')


def _amount_limit() -> Decimal:
    """Smallest amount that no longer fits ``Appointment.paid_amount``."""
    field = Appointment._meta.get_field('paid_amount')
    return Decimal(10) ** (field.max_digits - field.decimal_places)


def payment_status_for(paid_amount: Decimal, total_value: Decimal) -> str:
    paid_amount = Decimal(paid_amount)
    total_value = Decimal(total_value)
    if paid_amount >= total_value:
        return Appointment.STATUS_PAID
    if paid_amount <= 0:
        return Appointment.STATUS_OPEN
    return Appointment.STATUS_PARTIAL


def parse_amount(amount: Any) -> Decimal:
    """Coerce ``amount`` to a positive Decimal with two places.

    Raises InvalidPaymentAmount for anything else (None, text, NaN, <= 0).
    """
    if amount is None or isinstance(amount, bool):
        raise InvalidPaymentAmount(amount)
    try:
        value = Decimal(str(amount).strip().replace(',', '.'))
        if not value.is_finite():
            raise InvalidPaymentAmount(amount)
        value = value.quantize(CENT)
    except (InvalidOperation, ValueError):
        raise InvalidPaymentAmount(amount)
    if value <= 0:
        raise InvalidPaymentAmount(amount)
    return value


def record_payment(
    appointment: Appointment,
    amount: Any,
    *,
    payment_date: date | None = None,
    user=None,
) -> Appointment:
    """Add ``amount`` to the appointment's paid amount.

    Recomputes ``payment_status`` and sets ``payment_date`` (today when not
    given). ``appointment`` is refreshed in place and returned.
    """
    value = parse_amount(amount)
    if payment_date is None:
        payment_date = timezone.localdate()

    with transaction.atomic():
        locked = Appointment.objects.select_for_update().get(pk=appointment.pk)
        new_total = locked.paid_amount + value
        if new_total >= _amount_limit():
            raise InvalidPaymentAmount(
                amount,
                message=f'Payment amount too large: the paid total cannot exceed {_amount_limit() - CENT}.',
            )
        locked.paid_amount = new_total
        locked.payment_status = payment_status_for(locked.paid_amount, locked.total_value)
        locked.payment_date = payment_date
        locked.save(update_fields=['paid_amount', 'payment_status', 'payment_date', 'updated_at'])

    appointment.paid_amount = locked.paid_amount
    appointment.payment_status = locked.payment_status
    appointment.payment_date = locked.payment_date

    logger.info(
        'Payment of %s recorded for appointment %s (paid=%s/%s, status=%s)',
        value,
        appointment.pk,
        appointment.paid_amount,
        appointment.total_value,
        appointment.payment_status,
    )
    log_patient_action(
        user,
        'payment_recorded',
        patient_id=appointment.patient_id,
        meta={
            'appointment_id': appointment.pk,
            'amount': str(value),
            'payment_status': appointment.payment_status,
        },
    )
    return appointment
