"""
Alert Relay
Receives Alertmanager webhooks and sends email/SMS notifications by severity
"""

__version__ = '1.0.0'
