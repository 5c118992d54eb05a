import logging

from django.contrib.auth import login
from django.urls import reverse_lazy
from django.views.generic import CreateView

from .forms import SignUpForm

logger = logging.getLogger(__name__)


class SignUpView(CreateView):
    """
    Registers a new learner and signs them in.
    """
    form_class = SignUpForm
    template_name = "users/signup.html"
    success_url = reverse_lazy("dashboard:dashboard")

    def form_valid(self, form):
        response = super().form_valid(form)
        login(self.request, self.object)
        logger.info("New learner %s signed up", self.object.id)
        return response
