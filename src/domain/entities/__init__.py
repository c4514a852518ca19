"""
Film Club Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import MembershipStatus, ProposalStatus, Role

# Export all entities
from .admin import Admin
from .member import Member
from .film import Film
from .proposal import FilmProposal
from .attendance import Attendance

__all__ = [
    # Enums
    "Role",
    "ProposalStatus",
    "MembershipStatus",
    # Entities
    "Admin",
    "Member",
    "Film",
    "FilmProposal",
    "Attendance",
]
