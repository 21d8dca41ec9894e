from typing import FrozenSet, Iterable, List, Optional

from app.identity.schema import IdentityUser


def parse_email_list(raw: Optional[str]) -> List[str]:
    """'a@x.com, B@y.com' → ['a@x.com', 'b@y.com']"""
    if not raw:
        return []
    return [email.lower().strip() for email in raw.split(",") if email.strip()]


class AdminPolicy:
    """Allow-list de e-mails administradores, resolvida uma única vez na inicialização."""

    def __init__(self, emails: Iterable[str] = ()):
        self.emails: FrozenSet[str] = frozenset(email.lower().strip() for email in emails if email.strip())

    def is_email_admin(self, email: Optional[str]) -> bool:
        if not email:
            return False
        return email.lower().strip() in self.emails

    def is_admin_user(self, user: Optional[IdentityUser]) -> bool:
        if user is None:
            return False
        return self.is_email_admin(user.email) or user.has_admin_marker
