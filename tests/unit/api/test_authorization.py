from src.api.utils.authorization import check_access
from src.domain.entities import Role
from src.domain.principal import Principal

ADMIN = Principal(id=1, username="admin", role=Role.admin)
MEMBER = Principal(id=4, username="mariorossi042", role=Role.member)


def test_admin_passes_admin_requirement():
    assert check_access(ADMIN, [Role.admin]).is_ok()


def test_member_fails_admin_requirement():
    result = check_access(MEMBER, [Role.admin])

    assert result.is_err()
    assert result.error.code == "INSUFFICIENT_ROLE"
    assert result.error.message == "Admin access required"


def test_member_owning_resource():
    assert check_access(MEMBER, [Role.admin], owner_id=4).is_ok()


def test_member_not_owning_resource():
    result = check_access(MEMBER, [Role.admin], owner_id=5)

    assert result.is_err()
    assert result.error.code == "ACCESS_DENIED"


def test_admin_ignores_ownership():
    """Admin id 4 and member id 4 live in different tables"""
    assert check_access(ADMIN, [Role.admin], owner_id=999).is_ok()


def test_admin_id_never_owns_member_resource():
    admin_four = Principal(id=4, username="other", role=Role.admin)
    assert not admin_four.owns(4)
