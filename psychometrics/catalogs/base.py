"""Shared catalog types.

Catalog modules hold the fixed interpretation data of each instrument:
bands, descriptions and recommendation texts. Everything here is immutable
so one catalog can be shared by any number of concurrent scoring calls.
"""

from typing import Optional, Sequence, Tuple

from psychometrics.models.base import CatalogEntry


class Band(CatalogEntry):
    """A qualitative band a score falls into.

    Bands are matched from the top: a score belongs to the first band whose
    ``min_score`` it reaches, or exceeds when ``min_exclusive`` is set.
    """

    code: str
    label: str
    min_score: Optional[float] = None
    min_exclusive: bool = False
    description: str
    characteristics: Tuple[str, ...] = ()
    recommendations: Tuple[str, ...] = ()


def select_band(score: float, bands: Sequence[Band]) -> Band:
    """Pick the band of a score.

    Args:
        score: Score to classify
        bands: Bands ordered from highest to lowest ``min_score``; the last
            band has no lower bound

    Returns:
        Band: Matching band
    """
    for band in bands:
        if band.min_score is None:
            return band
        if band.min_exclusive and score > band.min_score:
            return band
        if not band.min_exclusive and score >= band.min_score:
            return band
    return bands[-1]
