"""Shared fixtures for the Converso tests."""

import random
from datetime import datetime, timezone

import pytest
from django.contrib.auth import get_user_model

from companions.models import Companion


@pytest.fixture
def now():
    return datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def learner(db):
    return get_user_model().objects.create_user(username="ada", email="ada@example.com", password="s3cret-pass!")


@pytest.fixture
def make_companion(learner):
    def _make(**overrides):
        fields = {
            'name': "Neura",
            'subject': "maths",
            'topic': "Derivatives",
            'duration': 20,
            'author': learner,
        }
        fields.update(overrides)
        return Companion.objects.create(**fields)
    return _make


@pytest.fixture
def signed_in_client(client, learner):
    client.force_login(learner)
    return client
