from django.urls import path

from .views import ReportsSummaryView

app_name = 'reports'

urlpatterns = [
    path('reports/summary/', ReportsSummaryView.as_view(), name='summary'),
]
