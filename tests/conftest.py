"""
Shared fixtures for the Alert Relay test suite
"""

import sys
from pathlib import Path
from types import SimpleNamespace
from unittest import mock

import pytest

# Add the src directory to the path
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from alert_relay.alerts import AlertManager, GmailSender, SMSSender
from alert_relay.server import create_app


@pytest.fixture
def config(tmp_path):
    """Config namespace pointing at an empty credentials directory"""
    return SimpleNamespace(
        port=8080,
        gmail_from='alerts@example.com',
        email_subject='ICP Email Notification',
        client_secret_file=tmp_path / 'client_secret.json',
        token_file=tmp_path / 'token.json',
        twilio_account='AC123',
        twilio_token='secret',
        twilio_from='+15550000000',
    )


@pytest.fixture
def email_sender():
    return mock.create_autospec(GmailSender, instance=True)


@pytest.fixture
def sms_sender():
    return mock.create_autospec(SMSSender, instance=True)


@pytest.fixture
def manager(email_sender, sms_sender):
    return AlertManager(email_sender, sms_sender)


@pytest.fixture
def client(config, manager):
    app = create_app(config, alert_manager=manager)
    app.config['TESTING'] = True
    return app.test_client()


def make_payload(*alerts, group_labels=None, common_labels=None):
    """Build an Alertmanager webhook body"""
    return {
        'receiver': 'relay',
        'status': 'firing',
        'groupLabels': group_labels or {'alertname': 'DiskFull'},
        'commonLabels': common_labels or {},
        'alerts': list(alerts),
    }


def make_alert(severity=None, status='firing', **annotations):
    labels = {'alertname': 'DiskFull'}
    if severity is not None:
        labels['severity'] = severity
    return {'status': status, 'labels': labels, 'annotations': annotations}
