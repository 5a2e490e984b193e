from rest_framework import serializers

from consultorio_backend.patients.exceptions import InvalidOdontogramEntry
from consultorio_backend.patients.models import Patient
from consultorio_backend.patients.odontogram import Odontogram


class PatientReadSerializer(serializers.ModelSerializer):
    """Read-only serializer with all fields."""

    class Meta:
        model = Patient
        fields = [
            'id',
            'name',
            'age',
            'phone',
            'notes',
            'odontogram',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class PatientWriteSerializer(serializers.ModelSerializer):
    """Write serializer for create/update operations.

    The odontogram is not writable here; it has its own endpoints. New
    patients start with an empty odontogram.
    """

    notes = serializers.CharField(required=False, allow_blank=True, default='')

    class Meta:
        model = Patient
        fields = [
            'name',
            'age',
            'phone',
            'notes',
        ]

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('name is required.')
        return value

    def validate_phone(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('phone is required.')
        return value

    def validate_notes(self, value):
        return (value or '').strip()


class OdontogramChartSerializer(serializers.Serializer):
    """Chart of all 32 teeth for one patient."""

    patient_id = serializers.IntegerField(source='pk', read_only=True)
    patient_name = serializers.CharField(source='name', read_only=True)
    teeth = serializers.SerializerMethodField()

    def get_teeth(self, obj):
        return Odontogram.for_patient(obj).chart()


class ToothStatusWriteSerializer(serializers.Serializer):
    """Body of PUT .../odontogram/<tooth>/ ; an empty code clears the tooth."""

    code = serializers.CharField(required=True, allow_blank=True, trim_whitespace=True)


class OdontogramReplaceSerializer(serializers.Serializer):
    """Body of PUT .../odontogram/ : the complete tooth -> code mapping."""

    odontogram = serializers.DictField(child=serializers.CharField(allow_blank=True))

    def validate_odontogram(self, value):
        try:
            return Odontogram(value).to_dict()
        except InvalidOdontogramEntry as exc:
            raise serializers.ValidationError(str(exc))
