from django.contrib.auth.mixins import LoginRequiredMixin
from django.views.generic import TemplateView

from companions.actions import get_all_companions, get_recent_sessions, get_user_companions, get_user_sessions


class HomeView(TemplateView):
    """
    Displays the homepage: popular companions and the latest sessions.
    """
    template_name = "core/home.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['companions'] = get_all_companions(limit=3)
        context['recent_sessions'] = get_recent_sessions(limit=10)
        return context


class MyJourneyView(LoginRequiredMixin, TemplateView):
    """
    Displays the signed-in learner's profile, past sessions and own companions.
    """
    template_name = "core/my_journey.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        user = self.request.user
        context['sessions'] = get_user_sessions(user.id)
        context['companions'] = get_user_companions(user.id)
        return context
