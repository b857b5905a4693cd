"""
Alert definitions for the Alertmanager webhook payload
"""

from enum import Enum
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..exceptions import PayloadError


class AlertSeverity(Enum):
    """Severity levels that trigger notifications"""
    WARNING = "warning"
    CRITICAL = "critical"

    @classmethod
    def parse(cls, value: str) -> Optional['AlertSeverity']:
        """Match a severity label case-insensitively, None if it has no channel"""
        try:
            return cls[(value or '').upper()]
        except KeyError:
            return None


def split_recipients(value: str) -> List[str]:
    """Split a comma separated recipient list, trimming each entry.

    Empty entries are kept so callers can decide how to report them.
    """
    return [entry.strip() for entry in (value or '').split(',')]


class Alert(BaseModel):
    """One firing or resolved alert"""

    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    status: str = ''
    labels: Dict[str, str] = Field(default_factory=dict)
    annotations: Dict[str, str] = Field(default_factory=dict)
    starts_at: str = Field('', alias='startsAt')
    ends_at: str = Field('', alias='endsAt')
    generator_url: str = Field('', alias='generatorURL')
    fingerprint: str = ''

    @field_validator('labels', 'annotations', mode='before')
    @classmethod
    def _null_map(cls, value):
        return {} if value is None else value

    @field_validator('status', 'starts_at', 'ends_at', 'generator_url', 'fingerprint', mode='before')
    @classmethod
    def _null_string(cls, value):
        return '' if value is None else value

    @property
    def severity(self) -> str:
        return self.labels.get('severity', '')

    def annotation(self, key: str) -> str:
        return self.annotations.get(key, '')

    def format_for_sms(self) -> str:
        """Format alert for SMS: summary followed by status"""
        return self.annotation('summary') + ' Status: ' + self.status


class AlertBatch(BaseModel):
    """Decoded webhook payload: group labels, common labels and alerts"""

    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    group_labels: Dict[str, str] = Field(default_factory=dict, alias='groupLabels')
    common_labels: Dict[str, str] = Field(default_factory=dict, alias='commonLabels')
    alerts: List[Alert] = Field(default_factory=list)

    @field_validator('group_labels', 'common_labels', mode='before')
    @classmethod
    def _null_map(cls, value):
        return {} if value is None else value

    @field_validator('alerts', mode='before')
    @classmethod
    def _null_list(cls, value):
        return [] if value is None else value

    @classmethod
    def from_json(cls, data: Union[str, bytes]) -> 'AlertBatch':
        """Decode a webhook body.

        Missing keys decode to empty values, unknown keys are ignored and a
        ``null`` body is an empty batch.

        Raises:
            PayloadError: If the body is not JSON or a field has the wrong type
        """
        if data.strip() in (b'null', 'null'):
            return cls()
        try:
            return cls.model_validate_json(data)
        except ValidationError as e:
            raise PayloadError(str(e)) from e
