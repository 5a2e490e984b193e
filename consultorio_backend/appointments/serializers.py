from decimal import Decimal

from rest_framework import serializers

from consultorio_backend.patients.models import Patient
from consultorio_backend.patients.odontogram import Odontogram
from consultorio_backend.patients.serializers import PatientReadSerializer

from .models import Appointment, Procedure
from .services.billing import payment_status_for


class ProcedureSerializer(serializers.ModelSerializer):
    class Meta:
        model = Procedure
        fields = [
            'id',
            'order',
            'name',
            'value',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('name is required.')
        return value


class AppointmentReadSerializer(serializers.ModelSerializer):
    """Read-only serializer; includes patient/procedure names and the open balance."""

    patient_name = serializers.CharField(source='patient.name', read_only=True)
    procedure_name = serializers.CharField(source='procedure.name', read_only=True)
    remaining = serializers.DecimalField(max_digits=10, decimal_places=2, read_only=True)

    class Meta:
        model = Appointment
        fields = [
            'id',
            'patient',
            'patient_name',
            'procedure',
            'procedure_name',
            'datetime',
            'notes',
            'anamnesis',
            'total_value',
            'paid_amount',
            'remaining',
            'payment_status',
            'payment_date',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class AppointmentWriteSerializer(serializers.ModelSerializer):
    """Write serializer for create/update.

    ``total_value`` is copied from the chosen procedure's current value and
    ``payment_status`` recomputed on every save. Payments are recorded
    through the payments endpoint, never here.
    """

    patient = serializers.PrimaryKeyRelatedField(queryset=Patient.objects.all())
    procedure = serializers.PrimaryKeyRelatedField(queryset=Procedure.objects.all())
    notes = serializers.CharField(required=False, allow_blank=True, default='')
    anamnesis = serializers.CharField(required=False, allow_blank=True)

    class Meta:
        model = Appointment
        fields = [
            'patient',
            'procedure',
            'datetime',
            'notes',
            'anamnesis',
        ]

    def _with_billing(self, validated_data, instance=None):
        procedure = validated_data.get('procedure') or instance.procedure
        paid_amount = instance.paid_amount if instance is not None else Decimal('0.00')
        validated_data['total_value'] = procedure.value
        validated_data['payment_status'] = payment_status_for(paid_amount, procedure.value)
        return validated_data

    def create(self, validated_data):
        return super().create(self._with_billing(validated_data))

    def update(self, instance, validated_data):
        return super().update(instance, self._with_billing(validated_data, instance))


class BillingRowSerializer(serializers.ModelSerializer):
    patient_name = serializers.CharField(source='patient.name', read_only=True)
    procedure_name = serializers.CharField(source='procedure.name', read_only=True)
    remaining = serializers.DecimalField(max_digits=10, decimal_places=2, read_only=True)

    class Meta:
        model = Appointment
        fields = [
            'id',
            'patient',
            'patient_name',
            'procedure_name',
            'datetime',
            'total_value',
            'paid_amount',
            'remaining',
            'payment_status',
            'payment_date',
        ]
        read_only_fields = fields


class PaymentCreateSerializer(serializers.Serializer):
    """Body of POST /api/appointments/<pk>/payments/.

    ``amount`` is passed through untouched; the billing service validates it
    so that every invalid amount is reported the same way.
    """

    amount = serializers.JSONField(required=False, allow_null=True)
    payment_date = serializers.DateField(required=False, allow_null=True)


class ConsultationSerializer(serializers.Serializer):
    """An appointment seen from the consultation page."""

    appointment = AppointmentReadSerializer(source='*', read_only=True)
    patient = PatientReadSerializer(read_only=True)
    anamnesis = serializers.CharField(read_only=True)
    odontogram = serializers.SerializerMethodField()

    def get_odontogram(self, obj):
        return Odontogram.for_patient(obj.patient).chart()


class AnamnesisWriteSerializer(serializers.Serializer):
    anamnesis = serializers.CharField(allow_blank=True, trim_whitespace=True)
