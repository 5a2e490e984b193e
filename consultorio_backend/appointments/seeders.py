import random
from datetime import datetime, time, timedelta
from decimal import Decimal

from django.db import transaction
from django.utils import timezone

from consultorio_backend.patients.models import Patient

from .models import Appointment, Procedure
from .services.billing import payment_status_for

RANDOM_SEED = 42

PROCEDURE_CATALOG = [
    (1, "Avaliação", Decimal("80.00")),
    (2, "Limpeza (profilaxia)", Decimal("150.00")),
    (3, "Restauração em resina", Decimal("200.00")),
    (4, "Extração simples", Decimal("180.00")),
    (5, "Tratamento de canal", Decimal("900.00")),
    (6, "Clareamento", Decimal("750.00")),
    (7, "Coroa de porcelana", Decimal("1500.00")),
    (8, "Aplicação de selante", Decimal("90.00")),
]


def seed_appointments(flush: bool = False, demo: bool = True) -> dict:
    """
    Seedet:
    - Leistungskatalog (Behandlungen)
    - Demo-Termine (vergangene und zukünftige) mit gemischtem Zahlungsstatus

    Wenn flush=True:
        - löscht Termine und Leistungskatalog dieser App
        - löscht KEINE Patienten
    """
    random.seed(RANDOM_SEED)
    stats: dict[str, int] = {}

    with transaction.atomic():
        if flush:
            Appointment.objects.all().delete()
            Procedure.objects.all().delete()

        procedures = _seed_procedures()
        stats["appointments_procedures"] = len(procedures)

        if demo:
            appointments = _seed_appointments(procedures, list(Patient.objects.all()))
            stats["appointments_appointments"] = len(appointments)

    return stats


def _seed_procedures() -> list[Procedure]:
    procedures: list[Procedure] = []
    for order, name, value in PROCEDURE_CATALOG:
        procedure, _created = Procedure.objects.get_or_create(
            name=name,
            defaults={"order": order, "value": value},
        )
        procedures.append(procedure)
    return procedures


def _seed_appointments(procedures: list[Procedure], patients: list[Patient]) -> list[Appointment]:
    if not patients or Appointment.objects.exists():
        return []

    tz = timezone.get_current_timezone()
    today = timezone.localdate()
    appointments: list[Appointment] = []

    for day_offset in range(-10, 8):
        day = today + timedelta(days=day_offset)
        if day.weekday() >= 5:
            continue
        for hour in random.sample([8, 9, 10, 11, 14, 15, 16, 17], k=2):
            procedure = random.choice(procedures)
            total = procedure.value
            paid = Decimal("0.00")
            payment_date = None
            if day_offset < 0:
                paid = random.choice([Decimal("0.00"), (total / 2).quantize(Decimal("0.01")), total])
                payment_date = day if paid > 0 else None

            appointments.append(
                Appointment(
                    patient=random.choice(patients),
                    procedure=procedure,
                    datetime=timezone.make_aware(datetime.combine(day, time(hour, 0)), tz),
                    total_value=total,
                    paid_amount=paid,
                    payment_status=payment_status_for(paid, total),
                    payment_date=payment_date,
                )
            )

    return Appointment.objects.bulk_create(appointments)
