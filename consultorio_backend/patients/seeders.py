import random

from django.db import transaction

from .models import Patient
from .odontogram import TEETH, ToothStatus

RANDOM_SEED = 42

DEMO_PATIENTS = [
    ("Ana Beatriz Costa", 34, "(11) 98765-4321"),
    ("Bruno Henrique Lima", 52, "(11) 99876-1234"),
    ("Carla Mendes", 27, "(21) 98888-0001"),
    ("Diego Araújo", 41, "(31) 97777-2222"),
    ("Eduarda Ramos", 9, "(11) 96666-3333"),
    ("Fernando Oliveira", 66, "(19) 95555-4444"),
]

CHART_CODES = [
    ToothStatus.CARIES,
    ToothStatus.RESTORED,
    ToothStatus.HEALTHY,
    ToothStatus.MISSING,
    ToothStatus.CALCULUS,
    ToothStatus.CROWN,
]


def seed_patients(flush: bool = False) -> dict:
    """
    Seedet Demo-Patienten mit einigen Einträgen im Zahnschema.

    Wenn flush=True werden alle Patienten (und damit ihre Termine)
    gelöscht.
    """
    random.seed(RANDOM_SEED)
    stats: dict[str, int] = {}

    with transaction.atomic():
        if flush:
            Patient.objects.all().delete()

        patients = []
        for name, age, phone in DEMO_PATIENTS:
            patient, created = Patient.objects.get_or_create(
                name=name,
                defaults={"age": age, "phone": phone},
            )
            if created:
                teeth = random.sample(TEETH, k=random.randint(0, 4))
                patient.odontogram = {tooth: random.choice(CHART_CODES).value for tooth in teeth}
                patient.save(update_fields=["odontogram", "updated_at"])
            patients.append(patient)

        stats["patients_patients"] = len(patients)

    return stats
