"""
Shared pytest fixtures and configuration for reactify tests.
"""

import pytest

from reactify import wrap
from tests.test_factories import create_change_tracker, create_profile


@pytest.fixture
def tracker():
    """Provide a fresh message-recording callback."""
    return create_change_tracker()


@pytest.fixture
def target():
    """Provide the canonical single-property mapping target."""
    return {"형규": "솔로"}


@pytest.fixture
def surrogate(target, tracker):
    """Provide ``target`` wrapped with ``tracker`` as its callback."""
    return wrap(target, tracker)


@pytest.fixture
def profile():
    """Provide a plain object target."""
    return create_profile()
