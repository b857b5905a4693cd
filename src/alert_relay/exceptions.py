"""
Exceptions raised by Alert Relay
"""


class AlertRelayError(Exception):
    """Base class for alert relay errors"""


class PayloadError(AlertRelayError, ValueError):
    """Webhook body could not be decoded into an alert batch"""


class CredentialError(AlertRelayError):
    """Gmail OAuth client or token could not be loaded"""
