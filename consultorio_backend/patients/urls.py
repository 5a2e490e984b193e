"""Patients App URLs.

Prefix: /api/
Routes:
    GET/POST              /api/patients/                          - List/Create patients
    GET/PUT/PATCH/DELETE  /api/patients/<pk>/                     - Retrieve/Update/Delete (cascades appointments)
    GET/PUT               /api/patients/<pk>/odontogram/          - Chart / replace whole map
    PUT                   /api/patients/<pk>/odontogram/<tooth>/  - Set one tooth
"""

from django.urls import path

from consultorio_backend.patients.views import (
    PatientDetailView,
    PatientListCreateView,
    PatientOdontogramView,
    PatientToothView,
)

app_name = 'patients'

urlpatterns = [
    path('patients/', PatientListCreateView.as_view(), name='list'),
    path('patients/<int:pk>/', PatientDetailView.as_view(), name='detail'),
    path('patients/<int:pk>/odontogram/', PatientOdontogramView.as_view(), name='odontogram'),
    path('patients/<int:pk>/odontogram/<str:tooth>/', PatientToothView.as_view(), name='odontogram-tooth'),
]
