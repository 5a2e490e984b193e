from django.db import migrations, models
import django.core.validators


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Patient",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=200)),
                ("age", models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(0)])),
                ("phone", models.CharField(max_length=40)),
                ("notes", models.TextField(blank=True, default="")),
                ("odontogram", models.JSONField(blank=True, default=dict)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Patient",
                "verbose_name_plural": "Patients",
                "db_table": "patients_patient",
                "ordering": ["name", "id"],
            },
        ),
    ]
