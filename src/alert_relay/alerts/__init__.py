"""
Alert routing for Alert Relay
Supports email (Gmail API) and SMS (Twilio) notifications
"""

from .alert_manager import AlertManager
from .base_alert import Alert, AlertBatch, AlertSeverity, split_recipients
from .email_sender import GmailSender
from .sms_sender import SMSSender

__all__ = ['AlertManager', 'Alert', 'AlertBatch', 'AlertSeverity', 'GmailSender', 'SMSSender',
           'split_recipients']
