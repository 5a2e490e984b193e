"""Appointments App URLs.

Prefix: /api/
Routes:
    GET/POST              /api/procedures/                                - Catalog
    GET/PUT/PATCH/DELETE  /api/procedures/<pk>/                           - DELETE cascades appointments
    GET/POST              /api/appointments/                              - List/Create
    GET/PUT/PATCH/DELETE  /api/appointments/<pk>/
    POST                  /api/appointments/<pk>/payments/                - Record a payment
    GET                   /api/billing/                                   - Billing rows
    GET                   /api/clinic/                                    - Waiting list
    GET/PATCH             /api/consultations/<pk>/                        - Consultation + anamnesis
    PUT                   /api/consultations/<pk>/odontogram/<tooth>/     - Odontogram from consultation
"""

from django.urls import path

from .views import (
    AppointmentDetailView,
    AppointmentListCreateView,
    BillingListView,
    ClinicQueueView,
    ConsultationToothView,
    ConsultationView,
    PaymentCreateView,
    ProcedureDetailView,
    ProcedureListCreateView,
)

app_name = 'appointments'

urlpatterns = [
    path('procedures/', ProcedureListCreateView.as_view(), name='procedure-list'),
    path('procedures/<int:pk>/', ProcedureDetailView.as_view(), name='procedure-detail'),
    path('appointments/', AppointmentListCreateView.as_view(), name='list'),
    path('appointments/<int:pk>/', AppointmentDetailView.as_view(), name='detail'),
    path('appointments/<int:pk>/payments/', PaymentCreateView.as_view(), name='payments'),
    path('billing/', BillingListView.as_view(), name='billing'),
    path('clinic/', ClinicQueueView.as_view(), name='clinic'),
    path('consultations/<int:pk>/', ConsultationView.as_view(), name='consultation'),
    path(
        'consultations/<int:pk>/odontogram/<str:tooth>/',
        ConsultationToothView.as_view(),
        name='consultation-tooth',
    ),
]
