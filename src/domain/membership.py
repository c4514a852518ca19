"""
Membership lifecycle rules

Pure functions: no I/O, no clock reads. Callers pass "today".
"""

from datetime import date

from .entities.enums import MembershipStatus

MEMBERSHIP_CODE_PREFIX = "CF"
MEMBERSHIP_CODE_DIGITS = 6
EXPIRING_SOON_DAYS = 30


def one_year_after(start: date) -> date:
    """Same calendar day one year later; 29 Feb falls back to 28 Feb."""
    try:
        return start.replace(year=start.year + 1)
    except ValueError:
        return start.replace(year=start.year + 1, day=28)


def classify_membership(
    expiry_date: date, today: date, expiring_soon_days: int = EXPIRING_SOON_DAYS
) -> MembershipStatus:
    """
    Classify a membership by days left until expiry.

    - days < 0: expired
    - 0 <= days <= expiring_soon_days: expiring_soon (expiry today included)
    - otherwise: active
    """
    days_left = (expiry_date - today).days
    if days_left < 0:
        return MembershipStatus.expired
    if days_left <= expiring_soon_days:
        return MembershipStatus.expiring_soon
    return MembershipStatus.active
