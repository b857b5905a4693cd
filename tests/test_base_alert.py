"""
Tests for the webhook payload model
"""

import json

import pytest

from alert_relay.alerts.base_alert import Alert, AlertBatch, AlertSeverity, split_recipients
from alert_relay.exceptions import PayloadError


class TestSplitRecipients:

    def test_entries_are_trimmed(self):
        assert split_recipients(" a@x.com ,b@y.com") == ["a@x.com", "b@y.com"]

    def test_empty_entries_are_kept(self):
        assert split_recipients("+1,,+2") == ["+1", "", "+2"]

    def test_trailing_comma(self):
        assert split_recipients("+1, ") == ["+1", ""]

    def test_empty_value(self):
        assert split_recipients("") == [""]


class TestAlertSeverity:

    @pytest.mark.parametrize("value", ["critical", "CRITICAL", "Critical"])
    def test_critical_any_case(self, value):
        assert AlertSeverity.parse(value) is AlertSeverity.CRITICAL

    def test_warning(self):
        assert AlertSeverity.parse("wArNiNg") is AlertSeverity.WARNING

    @pytest.mark.parametrize("value", ["", "info", "error", " critical", None])
    def test_unrouted(self, value):
        assert AlertSeverity.parse(value) is None


class TestAlert:

    def test_sms_format(self):
        alert = Alert(status="firing", annotations={"summary": "disk full"})
        assert alert.format_for_sms() == "disk full Status: firing"

    def test_sms_format_without_summary(self):
        assert Alert(status="resolved").format_for_sms() == " Status: resolved"

    def test_missing_annotation_is_empty(self):
        alert = Alert(annotations={"summary": "x"})
        assert alert.annotation("emails") == ""
        assert alert.severity == ""

    def test_keys_are_case_sensitive(self):
        alert = Alert(labels={"Severity": "critical"}, annotations={"Summary": "x"})
        assert alert.severity == ""
        assert alert.annotation("summary") == ""


class TestAlertBatch:

    def test_from_json(self):
        batch = AlertBatch.from_json(json.dumps({
            "receiver": "relay",
            "groupLabels": {"alertname": "DiskFull"},
            "commonLabels": {"job": "node"},
            "alerts": [
                {"status": "firing", "labels": {"severity": "critical"},
                 "annotations": {"summary": "a"}, "fingerprint": "abc",
                 "startsAt": "2024-01-01T00:00:00Z"},
                {"status": "resolved", "labels": {"severity": "warning"}, "annotations": {}},
            ],
        }))

        assert batch.group_labels == {"alertname": "DiskFull"}
        assert batch.common_labels == {"job": "node"}
        assert [a.status for a in batch.alerts] == ["firing", "resolved"]
        assert batch.alerts[0].fingerprint == "abc"
        assert batch.alerts[0].starts_at == "2024-01-01T00:00:00Z"

    def test_missing_fields_are_empty(self):
        batch = AlertBatch.from_json(b'{"alerts": [{}]}')
        assert batch.group_labels == {}
        assert batch.alerts[0] == Alert()

    def test_null_fields_are_empty(self):
        batch = AlertBatch.from_json(
            b'{"groupLabels": null, "alerts": [{"status": null, "labels": null, "annotations": null}]}'
        )
        assert batch.group_labels == {}
        assert batch.alerts[0] == Alert()

    @pytest.mark.parametrize("body", [b"null", b" null\n", "null"])
    def test_null_payload_is_empty_batch(self, body):
        assert AlertBatch.from_json(body) == AlertBatch()

    @pytest.mark.parametrize("body", [
        b"",
        b"{not json",
        b"[]",
        b'"alerts"',
        b'{"alerts": {}}',
        b'{"alerts": ["x"]}',
        b'{"groupLabels": []}',
        b'{"alerts": [{"labels": {"severity": 3}}]}',
        b'{"alerts": [{"status": 1}]}',
    ])
    def test_invalid_body_raises(self, body):
        with pytest.raises(PayloadError):
            AlertBatch.from_json(body)

    def test_deeply_nested_body_raises(self):
        with pytest.raises(PayloadError):
            AlertBatch.from_json("[" * 100000 + "]" * 100000)

    def test_trailing_data_is_rejected(self):
        with pytest.raises(PayloadError):
            AlertBatch.from_json(b'{"alerts": []}\n{}')
