from rest_framework import generics, status
from rest_framework.response import Response

from consultorio_backend.core.utils import log_patient_action
from consultorio_backend.patients.exceptions import InvalidOdontogramEntry
from consultorio_backend.patients.models import Patient
from consultorio_backend.patients.odontogram import STATUS_LABELS, Odontogram, display_label
from consultorio_backend.patients.permissions import OdontogramPermission, PatientPermission
from consultorio_backend.patients.serializers import (
    OdontogramChartSerializer,
    OdontogramReplaceSerializer,
    PatientReadSerializer,
    PatientWriteSerializer,
    ToothStatusWriteSerializer,
)
from consultorio_backend.patients.services import delete_patient, replace_odontogram, set_tooth_status


class PatientListCreateView(generics.ListCreateAPIView):
    """List all patients or create a new patient."""

    permission_classes = [PatientPermission]

    def get_queryset(self):
        return Patient.objects.all()

    def get_serializer_class(self):
        if self.request.method == 'POST':
            return PatientWriteSerializer
        return PatientReadSerializer

    def create(self, request, *args, **kwargs):
        write_serializer = self.get_serializer(data=request.data)
        write_serializer.is_valid(raise_exception=True)
        patient = write_serializer.save()
        log_patient_action(request.user, 'patient_created', patient_id=patient.pk)

        read_serializer = PatientReadSerializer(patient, context={'request': request})
        headers = self.get_success_headers(read_serializer.data)
        return Response(read_serializer.data, status=status.HTTP_201_CREATED, headers=headers)


class PatientDetailView(generics.RetrieveUpdateDestroyAPIView):
    """Retrieve, update or delete a patient.

    DELETE also removes every appointment of the patient.
    """

    permission_classes = [PatientPermission]

    def get_queryset(self):
        return Patient.objects.all()

    def get_serializer_class(self):
        if self.request.method in ['PUT', 'PATCH']:
            return PatientWriteSerializer
        return PatientReadSerializer

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        patient = self.get_object()

        write_serializer = PatientWriteSerializer(patient, data=request.data, partial=partial)
        write_serializer.is_valid(raise_exception=True)
        updated = write_serializer.save()
        log_patient_action(request.user, 'patient_updated', patient_id=updated.pk)

        return Response(PatientReadSerializer(updated).data, status=status.HTTP_200_OK)

    def destroy(self, request, *args, **kwargs):
        patient = self.get_object()
        delete_patient(patient, user=request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)


class ToothStatusUpdateMixin:
    """Shared PUT handler for ``.../odontogram/<tooth>/`` endpoints."""

    odontogram_source = 'patient'

    def update_tooth(self, request, patient, tooth):
        serializer = ToothStatusWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            set_tooth_status(
                patient,
                tooth,
                serializer.validated_data['code'],
                user=request.user,
                source=self.odontogram_source,
            )
        except InvalidOdontogramEntry as e:
            return Response(e.to_dict(), status=status.HTTP_400_BAD_REQUEST)

        return Response(OdontogramChartSerializer(patient).data, status=status.HTTP_200_OK)


class PatientOdontogramView(generics.GenericAPIView):
    """GET the 32-tooth chart of a patient, or PUT a complete replacement map."""

    permission_classes = [OdontogramPermission]

    def get_queryset(self):
        return Patient.objects.all()

    def get(self, request, *args, **kwargs):
        patient = self.get_object()
        log_patient_action(request.user, 'odontogram_view', patient_id=patient.pk)
        return Response(OdontogramChartSerializer(patient).data)

    def put(self, request, *args, **kwargs):
        patient = self.get_object()
        serializer = OdontogramReplaceSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        replace_odontogram(patient, serializer.validated_data['odontogram'], user=request.user)
        return Response(OdontogramChartSerializer(patient).data, status=status.HTTP_200_OK)


class PatientToothView(ToothStatusUpdateMixin, generics.GenericAPIView):
    """GET or PUT /api/patients/<pk>/odontogram/<tooth>/ {"code": "C"}"""

    permission_classes = [OdontogramPermission]

    def get_queryset(self):
        return Patient.objects.all()

    def get(self, request, *args, **kwargs):
        patient = self.get_object()
        tooth = kwargs['tooth']
        try:
            code = Odontogram.for_patient(patient).status_of(tooth)
        except InvalidOdontogramEntry as e:
            return Response(e.to_dict(), status=status.HTTP_400_BAD_REQUEST)
        return Response({
            'tooth': tooth,
            'code': code,
            'label': STATUS_LABELS[code],
            'display': display_label(tooth, code),
        })

    def put(self, request, *args, **kwargs):
        return self.update_tooth(request, self.get_object(), kwargs['tooth'])
