from pydantic import BaseModel

from .entities.enums import Role


class Principal(BaseModel):
    """Authenticated identity carried inside a verified access token"""

    id: int
    username: str
    role: Role

    def owns(self, member_id: int) -> bool:
        return self.role == Role.member and self.id == member_id
