"""Mapping of member unique constraints to duplicate errors"""

from src.libs.result import Error

DUPLICATE_ERRORS = {
    "uq_members_username": Error("DUPLICATE_USERNAME", "Username already exists"),
    "uq_members_tax_code": Error("DUPLICATE_TAX_CODE", "Tax code already exists"),
    "uq_members_membership_code": Error(
        "DUPLICATE_MEMBERSHIP_CODE", "Membership code already exists"
    ),
}

DUPLICATE_ENTRY = Error("DUPLICATE_ENTRY", "Duplicate data already exists")

MEMBER_NOT_FOUND = Error("MEMBER_NOT_FOUND", "Member not found")


def duplicate_error(constraint: str) -> Error:
    return DUPLICATE_ERRORS.get(constraint, DUPLICATE_ENTRY)
