from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models


class Procedure(models.Model):
    """Catalog entry: a dental procedure and its price (BRL)."""

    order = models.PositiveIntegerField(default=0)
    name = models.CharField(max_length=200)
    value = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))],
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'appointments_procedure'
        ordering = ['order', 'name', 'id']
        verbose_name = 'Procedure'
        verbose_name_plural = 'Procedures'

    def __str__(self) -> str:
        return f"{self.name} (R$ {self.value})"


class Appointment(models.Model):
    STATUS_OPEN = 'open'
    STATUS_PARTIAL = 'partial'
    STATUS_PAID = 'paid'

    PAYMENT_STATUS_CHOICES = [
        (STATUS_OPEN, 'Em aberto'),
        (STATUS_PARTIAL, 'Parcial'),
        (STATUS_PAID, 'Pago'),
    ]

    patient = models.ForeignKey(
        'patients.Patient',
        on_delete=models.CASCADE,
        related_name='appointments',
    )
    procedure = models.ForeignKey(
        Procedure,
        on_delete=models.CASCADE,
        related_name='appointments',
    )
    datetime = models.DateTimeField()
    notes = models.TextField(blank=True, default='')
    anamnesis = models.TextField(blank=True, default='')

    # total_value is copied from procedure.value on create/update
    total_value = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0.00'))
    paid_amount = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0.00'))
    payment_status = models.CharField(
        max_length=10,
        choices=PAYMENT_STATUS_CHOICES,
        default=STATUS_OPEN,
    )
    payment_date = models.DateField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'appointments_appointment'
        ordering = ['-datetime', 'id']
        indexes = [
            models.Index(fields=['datetime'], name='appointment_datetime_idx'),
            models.Index(fields=['payment_status'], name='appointment_status_idx'),
        ]

    @property
    def remaining(self) -> Decimal:
        return self.total_value - self.paid_amount

    def __str__(self) -> str:
        return f"Appointment {self.pk} patient={self.patient_id} {self.datetime:%Y-%m-%d %H:%M}"
