"""
Appointments services package.

Modules:
- billing: payment status calculation and payment recording
- catalog: procedure catalog maintenance (cascading delete)
"""

from consultorio_backend.appointments.services.billing import (
    payment_status_for,
    record_payment,
)
from consultorio_backend.appointments.services.catalog import delete_procedure

__all__ = [
    'payment_status_for',
    'record_payment',
    'delete_procedure',
]
