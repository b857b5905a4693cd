"""
SMS alert sender implementation using Twilio
"""

import logging

from twilio.rest import Client

from .base_alert import Alert, split_recipients

logger = logging.getLogger(__name__)


class SMSSender:
    """Send alerts via SMS using Twilio"""

    def __init__(self, account_sid: str, auth_token: str, twilio_phone_number: str):
        """Initialize SMS sender

        Args:
            account_sid: Twilio account SID
            auth_token: Twilio auth token
            twilio_phone_number: Twilio phone number (from)
        """
        self.account_sid = account_sid
        self.auth_token = auth_token
        self.twilio_phone_number = twilio_phone_number

    def _get_client(self) -> Client:
        """Create a Twilio client for this call"""
        return Client(self.account_sid, self.auth_token)

    def send(self, alert: Alert) -> None:
        """Send an alert via SMS, one message per phone number

        A failure for one recipient is logged and does not stop the others.

        Args:
            alert: Alert whose ``phones`` annotation lists the recipients
        """
        logger.info("sending sms through twilio...")

        try:
            client = self._get_client()
        except Exception as e:
            logger.error(f"Unable to create Twilio client: {e}")
            return

        message_body = alert.format_for_sms()

        for recipient in split_recipients(alert.annotation('phones')):
            if not recipient:
                logger.info("ignore empty recipient")
                continue

            try:
                message = client.messages.create(
                    body=message_body,
                    from_=self.twilio_phone_number,
                    to=recipient
                )
                logger.info(f"SMS alert sent to {recipient} (SID: {message.sid})")
            except Exception as e:
                logger.error(f"error sending SMS to {recipient}: {e}")

    def test_connection(self) -> bool:
        """Test Twilio credentials by fetching the account record

        Returns:
            True if the account could be fetched, False otherwise
        """
        try:
            client = self._get_client()
            account = client.api.v2010.accounts(self.account_sid).fetch()
            logger.info(f"SMS connection test successful (account status: {account.status})")
            return True
        except Exception as e:
            logger.error(f"SMS connection test failed: {e}")
            return False
