"""
Consultório Seed Command – erzeugt reproduzierbare Start- und Testdaten.

Verwendung:
    python manage.py seed              # Rollen, Admin, Leistungskatalog + Demo-Daten
    python manage.py seed --flush      # Demo-Daten löschen und neu aufbauen
    python manage.py seed --no-demo    # nur Rollen, Admin und Leistungskatalog

Initialer Admin: SEED_ADMIN_USERNAME / SEED_ADMIN_PASSWORD (Umgebung / .env).
Mehrfaches Ausführen legt keine Duplikate an.
"""

from django.core.management.base import BaseCommand
from django.db import transaction

from consultorio_backend.appointments.seeders import seed_appointments
from consultorio_backend.core.seeders import seed_core
from consultorio_backend.patients.seeders import seed_patients


class Command(BaseCommand):
    help = "Datenbank mit Rollen, initialem Admin, Leistungskatalog und Demo-Daten befüllen"

    def add_arguments(self, parser):
        parser.add_argument(
            "--flush",
            action="store_true",
            help="Vorhandene Demo-Daten vor dem Seeding löschen (Superuser bleiben unangetastet).",
        )
        parser.add_argument(
            "--no-demo",
            action="store_true",
            help="Nur Rollen, Admin-Benutzer und Leistungskatalog anlegen.",
        )

    def handle(self, *args, **options):
        flush = options.get("flush", False)
        demo = not options.get("no_demo", False)

        self.stdout.write("=" * 80)
        self.stdout.write("  Consultório Seed – Daten generieren")
        self.stdout.write("=" * 80)

        try:
            with transaction.atomic():
                stats = {}

                # 1. Core (Rollen, Benutzer)
                self.stdout.write("\n[1/3] Core (Rollen, Benutzer)...")
                core_stats = seed_core(flush=flush, demo=demo)
                stats.update(core_stats)
                self._print_stats(core_stats)

                # 2. Patienten
                if demo:
                    self.stdout.write("\n[2/3] Patienten...")
                    patient_stats = seed_patients(flush=flush)
                    stats.update(patient_stats)
                    self._print_stats(patient_stats)
                else:
                    self.stdout.write("\n[2/3] Patienten übersprungen (--no-demo)")

                # 3. Leistungskatalog + Termine
                self.stdout.write("\n[3/3] Behandlungen (Leistungskatalog, Termine)...")
                appointments_stats = seed_appointments(flush=flush, demo=demo)
                stats.update(appointments_stats)
                self._print_stats(appointments_stats)

                self.stdout.write("\n" + "=" * 80)
                self.stdout.write(self.style.SUCCESS("  ✓ Seeding erfolgreich abgeschlossen!"))
                self.stdout.write("=" * 80)
                self._print_summary(stats)

        except Exception as e:
            self.stdout.write(self.style.ERROR(f"\n✗ Fehler beim Seeding: {e}"))
            raise

    def _print_stats(self, stats):
        for key, value in stats.items():
            self.stdout.write(f"  ✓ {key}: {value}")

    def _print_summary(self, stats):
        self.stdout.write("\nErstellte Datensätze (gesamt):")
        for key, value in sorted(stats.items()):
            self.stdout.write(f"  • {key}: {value}")
