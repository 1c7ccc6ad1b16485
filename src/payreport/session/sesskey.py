"""Per-session keys guarding state-changing links."""

import hashlib
import hmac
from urllib.parse import urlencode

SESSKEY_LENGTH = 10


class SessionKey:
    """Session key derived from the application secret and a session id."""

    def __init__(self, secret: str, session_id: str) -> None:
        self._secret = secret
        self._session_id = session_id

    def token(self) -> str:
        digest = hmac.new(self._secret.encode(), self._session_id.encode(), hashlib.sha256).hexdigest()
        return digest[:SESSKEY_LENGTH]

    def verify(self, candidate: str | None) -> bool:
        if not candidate:
            return False
        return hmac.compare_digest(self.token(), candidate)


def cancel_url(payment_id: int, sesskey: str) -> str:
    """Relative link asking the current page to cancel a recurrent payment."""
    return "?" + urlencode({"cancel": payment_id, "sesskey": sesskey})
