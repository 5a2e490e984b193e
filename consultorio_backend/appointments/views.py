from rest_framework import generics, status
from rest_framework.response import Response

from consultorio_backend.core.utils import log_patient_action
from consultorio_backend.patients.views import ToothStatusUpdateMixin

from .exceptions import BillingError
from .models import Appointment, Procedure
from .permissions import (
    AppointmentPermission,
    BillingPermission,
    ClinicPermission,
    ConsultationPermission,
    ProcedurePermission,
)
from .serializers import (
    AnamnesisWriteSerializer,
    AppointmentReadSerializer,
    AppointmentWriteSerializer,
    BillingRowSerializer,
    ConsultationSerializer,
    PaymentCreateSerializer,
    ProcedureSerializer,
)
from .services.billing import record_payment
from .services.catalog import delete_procedure


def _appointments():
    return Appointment.objects.select_related('patient', 'procedure')


class ProcedureListCreateView(generics.ListCreateAPIView):
    """List the procedure catalog (by order, then name) or add a procedure."""

    permission_classes = [ProcedurePermission]
    serializer_class = ProcedureSerializer

    def get_queryset(self):
        return Procedure.objects.order_by('order', 'name', 'id')


class ProcedureDetailView(generics.RetrieveUpdateDestroyAPIView):
    """
    Retrieve, update or delete a procedure.

    Changing the value does not touch existing appointments. DELETE removes
    every appointment that uses the procedure.
    """

    permission_classes = [ProcedurePermission]
    serializer_class = ProcedureSerializer

    def get_queryset(self):
        return Procedure.objects.all()

    def destroy(self, request, *args, **kwargs):
        procedure = self.get_object()
        delete_procedure(procedure, user=request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)


class AppointmentListCreateView(generics.ListCreateAPIView):
    """
    List and create appointments.

    Optional filter: ?patient=<id>
    """

    permission_classes = [AppointmentPermission]

    def get_queryset(self):
        qs = _appointments()
        patient_id = self.request.query_params.get('patient')
        if patient_id and patient_id.isdigit():
            qs = qs.filter(patient_id=int(patient_id))
        return qs

    def get_serializer_class(self):
        if self.request.method == 'POST':
            return AppointmentWriteSerializer
        return AppointmentReadSerializer

    def list(self, request, *args, **kwargs):
        log_patient_action(request.user, 'appointment_list')
        return super().list(request, *args, **kwargs)

    def create(self, request, *args, **kwargs):
        write_serializer = self.get_serializer(data=request.data)
        write_serializer.is_valid(raise_exception=True)
        appointment = write_serializer.save()
        log_patient_action(request.user, 'appointment_create', appointment.patient_id)

        read_serializer = AppointmentReadSerializer(appointment, context={'request': request})
        headers = self.get_success_headers(read_serializer.data)
        return Response(read_serializer.data, status=status.HTTP_201_CREATED, headers=headers)


class AppointmentDetailView(generics.RetrieveUpdateDestroyAPIView):
    permission_classes = [AppointmentPermission]

    def get_queryset(self):
        return _appointments()

    def get_serializer_class(self):
        if self.request.method in ('PUT', 'PATCH'):
            return AppointmentWriteSerializer
        return AppointmentReadSerializer

    def retrieve(self, request, *args, **kwargs):
        appointment = self.get_object()
        log_patient_action(request.user, 'appointment_view', appointment.patient_id)
        return Response(AppointmentReadSerializer(appointment).data)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        appointment = self.get_object()

        write_serializer = AppointmentWriteSerializer(appointment, data=request.data, partial=partial)
        write_serializer.is_valid(raise_exception=True)
        updated = write_serializer.save()
        log_patient_action(request.user, 'appointment_update', updated.patient_id)

        return Response(AppointmentReadSerializer(updated).data, status=status.HTTP_200_OK)

    def destroy(self, request, *args, **kwargs):
        appointment = self.get_object()
        patient_id = appointment.patient_id
        appointment.delete()
        log_patient_action(request.user, 'appointment_delete', patient_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class PaymentCreateView(generics.GenericAPIView):
    """
    POST /api/appointments/<pk>/payments/ {"amount": "80.00", "payment_date": "2024-05-01"}

    Adds the amount to the appointment and returns the updated billing row.
    """

    permission_classes = [BillingPermission]

    def get_queryset(self):
        return _appointments()

    def post(self, request, *args, **kwargs):
        appointment = self.get_object()
        serializer = PaymentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            record_payment(
                appointment,
                serializer.validated_data.get('amount'),
                payment_date=serializer.validated_data.get('payment_date'),
                user=request.user,
            )
        except BillingError as e:
            return Response(e.to_dict(), status=status.HTTP_400_BAD_REQUEST)

        return Response(BillingRowSerializer(appointment).data, status=status.HTTP_200_OK)


class BillingListView(generics.ListAPIView):
    """Every appointment with total, paid, remaining and payment status."""

    permission_classes = [BillingPermission]
    serializer_class = BillingRowSerializer

    def get_queryset(self):
        return _appointments().order_by('-datetime', 'id')


class ClinicQueueView(generics.ListAPIView):
    """Waiting list: all appointments, earliest first."""

    permission_classes = [ClinicPermission]
    serializer_class = AppointmentReadSerializer

    def get_queryset(self):
        return _appointments().order_by('datetime', 'id')


class ConsultationView(generics.GenericAPIView):
    """
    GET   /api/consultations/<pk>/  appointment + patient + anamnesis + odontogram
    PATCH /api/consultations/<pk>/  {"anamnesis": "..."}
    """

    permission_classes = [ConsultationPermission]

    def get_queryset(self):
        return _appointments()

    def get(self, request, *args, **kwargs):
        appointment = self.get_object()
        log_patient_action(request.user, 'consultation_view', appointment.patient_id)
        return Response(ConsultationSerializer(appointment).data)

    def patch(self, request, *args, **kwargs):
        appointment = self.get_object()
        serializer = AnamnesisWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        appointment.anamnesis = serializer.validated_data['anamnesis']
        appointment.save(update_fields=['anamnesis', 'updated_at'])
        log_patient_action(
            request.user,
            'anamnesis_update',
            appointment.patient_id,
            meta={'appointment_id': appointment.pk},
        )
        return Response(ConsultationSerializer(appointment).data, status=status.HTTP_200_OK)


class ConsultationToothView(ToothStatusUpdateMixin, generics.GenericAPIView):
    """PUT /api/consultations/<pk>/odontogram/<tooth>/ {"code": "R"}"""

    permission_classes = [ConsultationPermission]
    odontogram_source = 'consultation'

    def get_queryset(self):
        return _appointments()

    def put(self, request, *args, **kwargs):
        appointment = self.get_object()
        return self.update_tooth(request, appointment.patient, kwargs['tooth'])
