from decimal import Decimal

from django.db import migrations, models
import django.core.validators
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("patients", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Procedure",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("order", models.PositiveIntegerField(default=0)),
                ("name", models.CharField(max_length=200)),
                (
                    "value",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.00"))],
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Procedure",
                "verbose_name_plural": "Procedures",
                "db_table": "appointments_procedure",
                "ordering": ["order", "name", "id"],
            },
        ),
        migrations.CreateModel(
            name="Appointment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("datetime", models.DateTimeField()),
                ("notes", models.TextField(blank=True, default="")),
                ("anamnesis", models.TextField(blank=True, default="")),
                ("total_value", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=10)),
                ("paid_amount", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=10)),
                (
                    "payment_status",
                    models.CharField(
                        choices=[("open", "Em aberto"), ("partial", "Parcial"), ("paid", "Pago")],
                        default="open",
                        max_length=10,
                    ),
                ),
                ("payment_date", models.DateField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "patient",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="appointments",
                        to="patients.patient",
                    ),
                ),
                (
                    "procedure",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="appointments",
                        to="appointments.procedure",
                    ),
                ),
            ],
            options={
                "db_table": "appointments_appointment",
                "ordering": ["-datetime", "id"],
                "indexes": [
                    models.Index(fields=["datetime"], name="appointment_datetime_idx"),
                    models.Index(fields=["payment_status"], name="appointment_status_idx"),
                ],
            },
        ),
    ]
