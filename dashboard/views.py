from dataclasses import asdict

from django.contrib.auth.mixins import LoginRequiredMixin
from django.views.generic import TemplateView
from rest_framework.response import Response
from rest_framework.views import APIView

from .analytics import METRICS, TIMEFRAMES, build_dashboard


class DashboardView(LoginRequiredMixin, TemplateView):
    """
    Displays the learning analytics of the signed-in student.
    The `timeframe` and `metric` query parameters drive the selectors.
    """
    template_name = "dashboard/student_dashboard.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        analytics = build_dashboard(
            self.request.user.id,
            timeframe=self.request.GET.get('timeframe', 'week'),
            metric=self.request.GET.get('metric', 'time'),
        )
        context['analytics'] = analytics
        context['weekly_data'] = [asdict(bucket) for bucket in analytics.weekly]
        context['timeframes'] = TIMEFRAMES
        context['metrics'] = METRICS
        return context


class AnalyticsAPIView(APIView):
    """
    Returns the dashboard view-model as JSON for client-side charts.
    """
    def get(self, request, *args, **kwargs):
        analytics = build_dashboard(
            request.user.id,
            timeframe=request.query_params.get('timeframe', 'week'),
            metric=request.query_params.get('metric', 'time'),
        )
        return Response(analytics.to_dict())
