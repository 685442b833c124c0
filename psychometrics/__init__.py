"""Psychometric test scoring and interpretation engine.

Scores worker submissions of six instruments (16PF, CFR, DISC, IL, IC and
TAC) and interprets them against fixed catalogs.

Example:
    >>> from psychometrics import ScoringService
    >>> result = ScoringService().score_submission("TEST_CFR", submission, bank)
"""

from psychometrics.services.scoring_service import ScoringService

__version__ = "1.0.0"

__all__ = ["ScoringService", "__version__"]
