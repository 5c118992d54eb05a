from django.urls import path
from .views import AnalyticsAPIView, DashboardView

app_name = 'dashboard'

urlpatterns = [
    path("", DashboardView.as_view(), name="dashboard"),
    # JSON version of the dashboard for the charts
    path("api/analytics/", AnalyticsAPIView.as_view(), name="analytics-api"),
]
