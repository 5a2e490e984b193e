from collections.abc import Mapping

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

from consultorio_backend.patients.exceptions import InvalidOdontogramEntry
from consultorio_backend.patients.odontogram import Odontogram


class Patient(models.Model):
    """Patient master record.

    ``odontogram`` is a sparse JSON object mapping FDI tooth numbers to status
    codes (see ``consultorio_backend.patients.odontogram``). Teeth missing from
    the mapping have no recorded condition.
    """

    name = models.CharField(max_length=200)
    age = models.PositiveIntegerField(validators=[MinValueValidator(0)])
    phone = models.CharField(max_length=40)
    notes = models.TextField(blank=True, default='')
    odontogram = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'patients_patient'
        ordering = ['name', 'id']
        verbose_name = 'Patient'
        verbose_name_plural = 'Patients'

    def __str__(self) -> str:
        return f"{self.name} (id={self.pk})"

    def clean(self):
        super().clean()
        value = self.odontogram or {}
        if not isinstance(value, Mapping):
            raise ValidationError({'odontogram': 'Odontogram must be an object of tooth -> status code.'})
        try:
            self.odontogram = Odontogram(value).to_dict()
        except InvalidOdontogramEntry as e:
            raise ValidationError({'odontogram': str(e)})
