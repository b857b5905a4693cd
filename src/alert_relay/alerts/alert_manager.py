"""
Central alert routing: severity label -> notification channels
"""

import logging
from typing import Dict, List

from .base_alert import Alert, AlertBatch, AlertSeverity
from .email_sender import GmailSender
from .sms_sender import SMSSender

logger = logging.getLogger(__name__)

# Channels run in this order for each severity
CHANNELS_BY_SEVERITY = {
    AlertSeverity.CRITICAL: ('email', 'sms'),
    AlertSeverity.WARNING: ('email',),
}


class AlertManager:
    """Routes each alert of a batch to its notification channels"""

    def __init__(self, email_sender: GmailSender, sms_sender: SMSSender):
        self.senders = {
            'email': email_sender,
            'sms': sms_sender,
        }

    @classmethod
    def from_config(cls, config) -> 'AlertManager':
        """Build the manager and its senders from a ``get_config()`` namespace"""
        email_sender = GmailSender(
            sender_email=config.gmail_from,
            subject=config.email_subject,
            client_secret_file=config.client_secret_file,
            token_file=config.token_file
        )
        sms_sender = SMSSender(
            account_sid=config.twilio_account,
            auth_token=config.twilio_token,
            twilio_phone_number=config.twilio_from
        )
        return cls(email_sender, sms_sender)

    def send_alert(self, alert: Alert) -> List[str]:
        """Send one alert via the channels its severity selects

        Args:
            alert: Alert to send

        Returns:
            Names of the channels that were attempted
        """
        logger.info(f"Alert: status={alert.status}, Labels={alert.labels}, Annotations={alert.annotations}")

        severity = AlertSeverity.parse(alert.severity)
        if severity is None:
            logger.info(f"no action on severity: {alert.severity}")
            return []

        channels = CHANNELS_BY_SEVERITY[severity]
        for channel in channels:
            self.senders[channel].send(alert)
        return list(channels)

    def dispatch(self, batch: AlertBatch) -> List[List[str]]:
        """Send every alert of a batch, in order received"""
        logger.info(f"Alerts: GroupLabels={batch.group_labels}, CommonLabels={batch.common_labels}")
        return [self.send_alert(alert) for alert in batch.alerts]

    def test_channels(self) -> Dict[str, bool]:
        """Test all configured alert channels

        Returns:
            Dictionary of channel test results
        """
        return {name: sender.test_connection() for name, sender in self.senders.items()}
