from unittest import mock

import django
import pytest
from django.conf import settings


def pytest_configure():
    settings.configure(
        DEBUG=False,
        SECRET_KEY='pingwarden-tests',
        ALLOWED_HOSTS=['testserver'],
        ROOT_URLCONF='tests.urls',
        INSTALLED_APPS=[],
    )
    django.setup()


@pytest.fixture
def source_page():
    '''
    Patches the source fetch. Set .return_value to a FakeResponse or
    .side_effect to an exception.
    '''
    with mock.patch('pingwarden.examiner.urlopen') as urlopen:
        yield urlopen


@pytest.fixture
def received_events():
    from pingwarden.signals import received

    events = []

    def handler(sender, event, **kwargs):
        events.append(event)

    received.connect(handler)
    yield events
    received.disconnect(handler)
