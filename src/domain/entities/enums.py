"""
Film Club Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class Role(str, Enum):
    """Principal role carried in access tokens"""

    admin = "admin"
    member = "member"


class ProposalStatus(str, Enum):
    """Review status of a film proposal"""

    pending = "pending"
    approved = "approved"
    rejected = "rejected"


class MembershipStatus(str, Enum):
    """Membership status derived from the expiry date (never stored)"""

    active = "active"
    expiring_soon = "expiring_soon"
    expired = "expired"
