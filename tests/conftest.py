"""Shared fixtures for the scoring engine tests.

Builders are session scoped so property-based tests can use them.
"""

import pytest

from psychometrics.core.config import Settings
from psychometrics.services.scoring_service import ScoringService
from tests.builders import (
    DISC_WORDS,
    build_bank,
    build_question,
    build_submission,
    disc_bank,
    likert_bank,
)


@pytest.fixture(scope="session")
def make_question():
    """Question builder."""
    return build_question


@pytest.fixture(scope="session")
def make_bank():
    """Question bank builder."""
    return build_bank


@pytest.fixture(scope="session")
def make_submission():
    """Submission builder."""
    return build_submission


@pytest.fixture(scope="session")
def make_likert_bank():
    """Likert bank builder."""
    return likert_bank


@pytest.fixture(scope="session")
def make_disc_bank():
    """DISC bank builder."""
    return disc_bank


@pytest.fixture(scope="session")
def disc_words():
    """Word of each DISC dimension used by the DISC bank builder."""
    return dict(DISC_WORDS)


@pytest.fixture
def settings():
    """Test settings, isolated from any .env file."""
    return Settings(_env_file=None, APP_ENV="test", SCORING_VERSION="test-1.0")


@pytest.fixture
def scoring_service(settings):
    """Scoring service with test settings."""
    return ScoringService(settings=settings)
