"""
Site profile base class.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import List, Optional

from ...common.config_loader import DEFAULT_SETTINGS, ExtractionSettings
from ..document import PageDocument, PageLocation

logger = logging.getLogger(__name__)


class SiteProfile:
    """
    Retailer-specific overrides for the extraction cascades.

    Subclasses override the strategies their retailer needs. A strategy that
    finds nothing returns an empty list or None, and the generic cascade
    takes over.
    """

    name = "generic"

    def matches(self, location: PageLocation) -> bool:
        return False

    def extract_images(
        self,
        document: PageDocument,
        settings: ExtractionSettings = DEFAULT_SETTINGS,
    ) -> List[str]:
        return []

    def extract_price(self, document: PageDocument) -> Optional[Decimal]:
        return None

    def extract_currency(self, document: PageDocument) -> Optional[str]:
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class GenericProfile(SiteProfile):
    """Profile for sites without retailer-specific markup."""


def run_strategy(profile: SiteProfile, strategy: str, *args):
    """
    Call one of a profile's strategies.

    A strategy that raises counts as finding nothing, so the generic
    cascade still runs.

    Args:
        profile: Site profile
        strategy: Method name, e.g. "extract_price"
        *args: Arguments for the strategy

    Returns:
        The strategy result, or None if it failed
    """
    try:
        return getattr(profile, strategy)(*args)
    except Exception:
        logger.warning("%s.%s failed", profile.name, strategy, exc_info=True)
        return None
