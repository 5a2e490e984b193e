from rest_framework.response import Response
from rest_framework.views import APIView

from consultorio_backend.core.utils import log_patient_action

from .kpis import get_billing_summary
from .permissions import ReportsPermission


class ReportsSummaryView(APIView):
    """GET /api/reports/summary/ - billing and activity totals."""

    permission_classes = [ReportsPermission]

    def get(self, request, *args, **kwargs):
        log_patient_action(request.user, 'reports_view')
        return Response(get_billing_summary())
