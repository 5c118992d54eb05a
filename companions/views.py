# companions/views.py

from django.contrib.auth.mixins import LoginRequiredMixin
from django.shortcuts import get_object_or_404, redirect
from django.urls import reverse_lazy
from django.views.generic import TemplateView, View
from django.views.generic.edit import FormView

from .actions import add_to_session_history, create_companion, get_all_companions
from .forms import CompanionForm
from .models import Companion


class CompanionLibraryView(TemplateView):
    """
    Lists companions, optionally filtered by subject and searched by topic.
    """
    template_name = "companions/companion_list.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        subject = self.request.GET.get('subject', '')
        topic = self.request.GET.get('topic', '')

        context['companions'] = get_all_companions(limit=50, subject=subject, topic=topic)
        context['subject_choices'] = Companion.SUBJECT_CHOICES
        context['filtered_subject'] = subject
        context['filtered_topic'] = topic
        return context


class CompanionCreateView(LoginRequiredMixin, FormView):
    form_class = CompanionForm
    template_name = "companions/companion_form.html"
    success_url = reverse_lazy("companions:library")

    def form_valid(self, form):
        create_companion(form.cleaned_data, self.request.user)
        return super().form_valid(form)


class StartSessionView(LoginRequiredMixin, View):
    """
    Records a study session with a companion, then sends the learner to their journey.
    """
    def post(self, request, companion_id):
        companion = get_object_or_404(Companion, pk=companion_id)
        add_to_session_history(companion.id, request.user.id)
        return redirect('core:my-journey')
