"""
KPI calculations for the billing and clinical report.
"""
from decimal import Decimal
from typing import Any

from django.db.models import Count, Sum
from django.utils import timezone

from consultorio_backend.appointments.models import Appointment, Procedure

TOP_PROCEDURES_LIMIT = 5
ZERO = Decimal('0.00')


def get_appointment_counts(now=None) -> dict[str, int]:
    """Appointment count and how many already took place (consultations)."""
    now = now or timezone.now()
    return {
        'total_appointments': Appointment.objects.count(),
        'total_consultations': Appointment.objects.filter(datetime__lte=now).count(),
    }


def get_billing_totals() -> dict[str, Decimal]:
    """Billed, paid and pending totals."""
    totals = Appointment.objects.aggregate(
        billed=Sum('total_value'),
        paid=Sum('paid_amount'),
    )
    billed = totals['billed'] or ZERO
    paid = totals['paid'] or ZERO
    return {
        'total_billed': billed,
        'total_paid': paid,
        'total_pending': billed - paid,
    }


def get_patients_with_debt() -> int:
    """Distinct patients with at least one appointment not fully paid."""
    return (
        Appointment.objects.exclude(payment_status=Appointment.STATUS_PAID)
        .values('patient_id')
        .distinct()
        .count()
    )


def get_status_counts() -> dict[str, int]:
    counts = dict(
        Appointment.objects.values('payment_status')
        .annotate(count=Count('id'))
        .values_list('payment_status', 'count')
    )
    return {status: counts.get(status, 0) for status, _label in Appointment.PAYMENT_STATUS_CHOICES}


def get_top_procedures(limit: int = TOP_PROCEDURES_LIMIT) -> list[dict[str, Any]]:
    """Most performed procedures by number of appointments."""
    rows = (
        Procedure.objects.annotate(count=Count('appointments'))
        .filter(count__gt=0)
        .order_by('-count', 'order', 'name')[:limit]
    )
    return [
        {'procedure_id': p.pk, 'name': p.name, 'count': p.count}
        for p in rows
    ]


def get_billing_summary(now=None) -> dict[str, Any]:
    """Full report summary."""
    summary: dict[str, Any] = {}
    summary.update(get_appointment_counts(now))
    summary.update(get_billing_totals())
    summary['patients_with_debt'] = get_patients_with_debt()
    summary['status_counts'] = get_status_counts()
    summary['top_procedures'] = get_top_procedures()
    summary['generated_at'] = timezone.now().isoformat()
    return summary
