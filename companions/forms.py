# companions/forms.py

from django import forms
from django.core.exceptions import ValidationError
from .models import Companion

# Session length bounds, in minutes
MIN_DURATION = 5
MAX_DURATION = 120


class CompanionForm(forms.ModelForm):
    """
    Form for building a new companion with custom validation.
    """
    class Meta:
        model = Companion
        fields = ['name', 'subject', 'topic', 'voice', 'style', 'duration']
        labels = {
            'name': 'Companion Name',
            'topic': 'What should the companion help with?',
            'duration': 'Estimated session duration (minutes)',
        }
        widgets = {
            'name': forms.TextInput(attrs={'class': 'input', 'placeholder': 'E.g., Neura the Brainy Explorer'}),
            'topic': forms.Textarea(attrs={'class': 'input', 'rows': 2, 'placeholder': 'E.g., Derivatives & Integrals'}),
            'duration': forms.NumberInput(attrs={'class': 'input', 'min': MIN_DURATION, 'max': MAX_DURATION}),
        }

    def clean_name(self):
        name = self.cleaned_data.get('name', '').strip()
        if not name:
            raise ValidationError("The companion needs a name.")
        return name

    def clean_duration(self):
        """Checks that the duration stays within the allowed bounds."""
        duration = self.cleaned_data.get('duration')
        if duration is None:
            raise ValidationError("Duration is required.")
        if duration < MIN_DURATION or duration > MAX_DURATION:
            raise ValidationError(f"The duration must be between {MIN_DURATION} and {MAX_DURATION} minutes.")
        return duration
