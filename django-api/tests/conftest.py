"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def staff_user(django_user_model):
    return django_user_model.objects.create_user(
        username="organiser", password="darts-night", is_staff=True
    )


@pytest.fixture
def staff_client(staff_user) -> APIClient:
    client = APIClient()
    client.force_authenticate(user=staff_user)
    return client


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import caches
    for cache in caches.all():
        cache.clear()
    yield
    for cache in caches.all():
        cache.clear()


@pytest.fixture
def make_event(db):
    """Create Event rows; keyword arguments override the defaults."""
    from events.models import Event

    def factory(**fields):
        values = {"title": "Friday Night Darts", "location": "JAX Darts Bar"}
        values.update(fields)
        return Event.objects.create(**values)

    return factory


@pytest.fixture
def make_section(db):
    from events.models import Section

    def factory(**fields):
        values = {"title": "Leagues", "order": 0}
        values.update(fields)
        return Section.objects.create(**values)

    return factory


@pytest.fixture
def make_signup(db):
    from events.models import Signup

    def factory(event, **fields):
        values = {"name": "Ann", "email": "ann@example.com", "phone": "555-0100"}
        values.update(fields)
        return Signup.objects.create(event=event, **values)

    return factory
