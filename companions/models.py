# companions/models.py

from django.db import models
from django.conf import settings


class Companion(models.Model):
    """
    An AI tutor persona configured by a user for a subject and a topic.
    """
    SUBJECT_CHOICES = [
        ('maths', 'Maths'),
        ('language', 'Language'),
        ('science', 'Science'),
        ('history', 'History'),
        ('coding', 'Coding'),
        ('economics', 'Economics'),
    ]
    VOICE_CHOICES = [('male', 'Male'), ('female', 'Female')]
    STYLE_CHOICES = [('formal', 'Formal'), ('casual', 'Casual')]

    name = models.CharField(max_length=100, verbose_name="Companion Name")
    subject = models.CharField(max_length=50, choices=SUBJECT_CHOICES, verbose_name="Subject")
    topic = models.CharField(max_length=255, verbose_name="Topic")
    voice = models.CharField(max_length=10, choices=VOICE_CHOICES, default='female', verbose_name="Voice")
    style = models.CharField(max_length=10, choices=STYLE_CHOICES, default='casual', verbose_name="Style")
    duration = models.PositiveIntegerField(default=15, help_text="Estimated session length in minutes.")
    author = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='companions', verbose_name="Author")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name} ({self.get_subject_display()})"


class SessionHistory(models.Model):
    """
    One study session a user started with a companion.
    """
    companion = models.ForeignKey(Companion, on_delete=models.CASCADE, related_name='sessions')
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='session_history')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name_plural = "Session history"
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.user.username} with {self.companion.name} on {self.created_at.strftime('%Y-%m-%d')}"
