import logging

from src.app.services.email_service import IEmailService

logger = logging.getLogger(__name__)


class LogOnlyEmailService(IEmailService):
    """
    Email adapter used until a mail transport is wired in.

    Records the recipient of each message and drops it. The reset URL carries
    a live token, so it is never written to the log.
    """

    async def send_password_reset(self, email: str, reset_url: str) -> None:
        logger.info("Password reset email for %s dropped: no mail transport configured", email)
