from abc import ABC, abstractmethod


class IEmailService(ABC):
    """Outbound email port - application layer"""

    @abstractmethod
    async def send_password_reset(self, email: str, reset_url: str) -> None:
        """Deliver a password reset link to ``email``"""
        pass
