"""Admin session state"""

import logging
from typing import Optional

from foodbridge.services.admin_login_log import AdminLoginLog

logger = logging.getLogger(__name__)

# Single demo credential pair. This is a gate for the dashboard, not a
# security boundary: no hashing, no tokens, no expiry.
ADMIN_EMAIL = "admin@ngo.org"
ADMIN_PASSWORD = "admin123"


class AuthSession:
    """
    Logged-in state of the admin dashboard.

    One instance represents one browser session. It starts logged out,
    records every successful login in the admin login log and forgets the
    identity again on logout.
    """

    def __init__(self, login_log: AdminLoginLog):
        self.login_log = login_log
        self.is_logged_in = False
        self.identity: Optional[str] = None

    def login(self, email: str, password: str) -> bool:
        """
        Check the credentials and open the session if they match.

        Args:
            email: Admin email address
            password: Plaintext password

        Returns:
            True on success; False leaves the session untouched
        """
        if email != ADMIN_EMAIL or password != ADMIN_PASSWORD:
            logger.warning(f"Rejected admin login for {email!r}")
            return False

        self.is_logged_in = True
        self.identity = email

        if not self.login_log.record_login(email):
            logger.warning(f"Admin {email} logged in but the login was not recorded")
        return True

    def logout(self) -> None:
        if self.identity:
            logger.info(f"Admin {self.identity} logged out")
        self.is_logged_in = False
        self.identity = None

    def to_dict(self) -> dict:
        return {"is_logged_in": self.is_logged_in, "identity": self.identity}
