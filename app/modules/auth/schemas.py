from pydantic import BaseModel
from typing import Any, Optional


class SessionInfo(BaseModel):
    """Session fields safe to expose to the admin UI (no tokens)."""
    user_id: str
    email: Optional[str] = None
    expires_at: Optional[int] = None

    @classmethod
    def from_session(cls, session: Any) -> "SessionInfo":
        user = session.user
        return cls(
            user_id=user.id,
            email=getattr(user, "email", None),
            expires_at=getattr(session, "expires_at", None),
        )
