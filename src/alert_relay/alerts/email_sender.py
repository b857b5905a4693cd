"""
Email alert sender implementation using the Gmail API
"""

import base64
import logging
from email.mime.text import MIMEText
from pathlib import Path
from typing import List

from .base_alert import Alert, split_recipients
from .credentials import load_gmail_service

logger = logging.getLogger(__name__)


class GmailSender:
    """Send alerts via Gmail.

    Sending is fire-and-forget: every failure is logged and ``send`` never
    raises or reports back to the caller.
    """

    def __init__(self, sender_email: str, subject: str,
                 client_secret_file: Path, token_file: Path):
        """Initialize Gmail sender

        Args:
            sender_email: Sender email address
            subject: Subject line used for every alert
            client_secret_file: OAuth client descriptor
            token_file: Pre-provisioned OAuth token
        """
        self.sender_email = sender_email
        self.subject = subject
        self.client_secret_file = client_secret_file
        self.token_file = token_file

    def _get_service(self):
        # Credentials are re-read on every call
        return load_gmail_service(self.client_secret_file, self.token_file)

    def build_message(self, alert: Alert) -> MIMEText:
        """Build the MIME message for an alert"""
        recipients = self.recipients(alert)

        msg = MIMEText(alert.annotation('summary'), 'plain', 'utf-8')
        msg['From'] = self.sender_email
        if recipients:
            msg['To'] = ', '.join(recipients)
        msg['Subject'] = self.subject
        return msg

    @staticmethod
    def recipients(alert: Alert) -> List[str]:
        return [r for r in split_recipients(alert.annotation('emails')) if r]

    def send(self, alert: Alert) -> None:
        """Send an alert via email

        Args:
            alert: Alert whose ``emails`` and ``summary`` annotations are used
        """
        logger.info("sending gmail...")

        try:
            service = self._get_service()
        except Exception as e:
            logger.error(f"Unable to get Gmail service: {e}")
            return

        try:
            raw = base64.urlsafe_b64encode(self.build_message(alert).as_bytes()).decode('ascii')
        except Exception as e:
            logger.error(f"error to convert into bytes: {e}")
            return

        try:
            service.users().messages().send(userId='me', body={'raw': raw}).execute()
            logger.info(f"Email alert sent to {', '.join(self.recipients(alert)) or '<no recipients>'}")
        except Exception as e:
            logger.error(f"Error sending gmail: {e}")

    def test_connection(self) -> bool:
        """Test Gmail credentials without sending mail

        Returns:
            True if the profile of the authorised account could be fetched
        """
        try:
            service = self._get_service()
            profile = service.users().getProfile(userId='me').execute()
            logger.info(f"Gmail connection test successful ({profile.get('emailAddress')})")
            return True
        except Exception as e:
            logger.error(f"Gmail connection test failed: {e}")
            return False
