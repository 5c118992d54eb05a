from django.urls import path

from .views import HomeView, MyJourneyView

app_name = 'core'

urlpatterns = [
    path("", HomeView.as_view(), name="home"),
    path("my-journey/", MyJourneyView.as_view(), name="my-journey"),
]
