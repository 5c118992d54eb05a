from django.urls import path

from .views import CompanionCreateView, CompanionLibraryView, StartSessionView

app_name = 'companions'

urlpatterns = [
    path("", CompanionLibraryView.as_view(), name="library"),
    path("new/", CompanionCreateView.as_view(), name="create"),
    path("<int:companion_id>/start/", StartSessionView.as_view(), name="start-session"),
]
