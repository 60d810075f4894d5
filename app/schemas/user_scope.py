"""Requester scope for translation history queries."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ScopeKind(str, Enum):
    UNSPECIFIED = "unspecified"  # no requester given: every translation
    ANONYMOUS = "anonymous"      # explicitly anonymous: public translations only
    OWNER = "owner"              # a concrete user: that user's translations only


@dataclass(frozen=True)
class UserScope:
    """
    Who is asking for translation history.

    Keeps "no user given" and "explicitly anonymous" apart, which a plain
    Optional[str] cannot do.
    """
    kind: ScopeKind
    user_id: Optional[str] = None

    def __post_init__(self):
        if (self.kind == ScopeKind.OWNER) != (self.user_id is not None):
            raise ValueError("user_id is required for OWNER scope and forbidden otherwise")

    @classmethod
    def unspecified(cls) -> "UserScope":
        return cls(ScopeKind.UNSPECIFIED)

    @classmethod
    def anonymous(cls) -> "UserScope":
        return cls(ScopeKind.ANONYMOUS)

    @classmethod
    def owner(cls, user_id: str) -> "UserScope":
        return cls(ScopeKind.OWNER, user_id)

    @property
    def favorites_user_id(self) -> Optional[str]:
        """User whose favorites annotate results; only an identified owner has any."""
        return self.user_id if self.kind == ScopeKind.OWNER else None
