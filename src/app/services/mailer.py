from abc import ABC, abstractmethod

from src.core.result import Result


class IMailer(ABC):
    """Outbound mail transport - application layer"""

    @abstractmethod
    def send(self, to: str, subject: str, html: str) -> Result[str]:
        """
        Send an HTML email.

        Returns:
            Result with a message identifier, or Error(MAIL_SEND_FAILED)
        """
        pass
