# companions/actions.py
"""
Data-access actions used by the pages. They return plain dicts so the
callers never depend on the ORM objects.
"""

import logging

from django.db.models import Q

from .models import Companion, SessionHistory

logger = logging.getLogger(__name__)


def companion_to_dict(companion):
    return {
        'id': companion.id,
        'name': companion.name,
        'subject': companion.subject,
        'topic': companion.topic,
        'voice': companion.voice,
        'style': companion.style,
        'duration': companion.duration,
        'created_at': companion.created_at,
    }


def create_companion(form_data, author):
    """Creates a companion owned by `author` from validated form data."""
    companion = Companion.objects.create(author=author, **form_data)
    logger.info("Companion %s created by user %s", companion.id, author.id)
    return companion


def get_all_companions(limit=10, subject=None, topic=None):
    """
    Library listing, newest first. `subject` filters on the subject key and
    `topic` searches both the topic and the companion name.
    """
    companions = Companion.objects.all()
    if subject:
        companions = companions.filter(subject__iexact=subject)
    if topic:
        companions = companions.filter(Q(topic__icontains=topic) | Q(name__icontains=topic))
    return [companion_to_dict(c) for c in companions[:limit]]


def get_companion(companion_id):
    companion = Companion.objects.filter(id=companion_id).first()
    return companion_to_dict(companion) if companion else None


def add_to_session_history(companion_id, user_id):
    """Records that `user_id` started a study session with `companion_id`."""
    entry = SessionHistory.objects.create(companion_id=companion_id, user_id=user_id)
    logger.info("Session %s recorded for user %s", entry.id, user_id)
    return entry


def get_recent_sessions(limit=10):
    """Companions used in the most recent sessions across all users."""
    history = SessionHistory.objects.select_related('companion').order_by('-created_at')[:limit]
    return [companion_to_dict(entry.companion) for entry in history]


def get_user_sessions(user_id, limit=10):
    """Companions used in the most recent sessions of one user."""
    history = SessionHistory.objects.filter(user_id=user_id).select_related('companion').order_by('-created_at')[:limit]
    return [companion_to_dict(entry.companion) for entry in history]


def get_user_companions(user_id):
    """Companions authored by one user, newest first."""
    return [companion_to_dict(c) for c in Companion.objects.filter(author_id=user_id).order_by('-created_at')]
