"""
Retailer site profiles.

A profile supplies retailer-specific strategies that run before the generic
cascades. Pages from unknown sites get GenericProfile, whose strategies
return nothing.
"""

from __future__ import annotations

from ..document import PageLocation
from .amazon import AmazonProfile
from .base import GenericProfile, SiteProfile, run_strategy

# Registry of retailer profiles, checked in order
SITE_PROFILES = (
    AmazonProfile(),
)

GENERIC_PROFILE = GenericProfile()


def get_profile_for_location(location: PageLocation) -> SiteProfile:
    """
    Get the site profile for a page location.

    Args:
        location: Location of the page

    Returns:
        Matching retailer profile, or the generic profile
    """
    for profile in SITE_PROFILES:
        if profile.matches(location):
            return profile

    return GENERIC_PROFILE


__all__ = [
    'SiteProfile',
    'GenericProfile',
    'AmazonProfile',
    'SITE_PROFILES',
    'GENERIC_PROFILE',
    'get_profile_for_location',
    'run_strategy',
]
