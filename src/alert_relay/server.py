"""
HTTP server: health check and Alertmanager webhook endpoints
"""

import json
import logging

from flask import Flask, Response, current_app, request

from .alerts import AlertBatch, AlertManager
from .config import get_config, get_logger
from .exceptions import PayloadError

# Handlers live on the package logger; module loggers propagate to it
get_logger('alert_relay')
logger = logging.getLogger(__name__)


def as_json(status: int, message: str) -> Response:
    """Build the {Status, Message} response body used by the webhook"""
    body = json.dumps({'Status': status, 'Message': message}, separators=(',', ':'))
    return Response(body, status=status, mimetype='application/json')


def healthz() -> Response:
    return Response('Ok!', mimetype='text/plain')


def webhook() -> Response:
    """Decode an alert batch and notify by severity.

    Only a body that cannot be decoded is reported to the caller (400).
    Notification failures are logged by the senders and the caller always
    gets 200 once the batch has been processed.
    """
    try:
        batch = AlertBatch.from_json(request.get_data())
    except PayloadError as e:
        logger.warning(f"Rejected webhook body: {e}")
        return as_json(400, str(e) or 'invalid request body')

    current_app.extensions['alert_manager'].dispatch(batch)
    return as_json(200, 'success')


def create_app(config=None, alert_manager: AlertManager = None) -> Flask:
    """Create the Flask application

    Args:
        config: Namespace from ``get_config()`` (read from environment if omitted)
        alert_manager: Pre-built manager, mainly for tests

    Returns:
        Flask app with ``/healthz`` and ``/webhook`` routes
    """
    if config is None:
        config = get_config()
    if alert_manager is None:
        alert_manager = AlertManager.from_config(config)

    app = Flask(__name__)
    app.extensions['alert_manager'] = alert_manager

    app.add_url_rule('/healthz', 'healthz', healthz, methods=['GET'])
    app.add_url_rule('/webhook', 'webhook', webhook, methods=['POST'])
    return app


def serve(config=None) -> None:
    """Serve until the listener fails, one thread per request

    Raises:
        OSError: If the port cannot be bound
    """
    if config is None:
        config = get_config()

    app = create_app(config)
    logger.info(f"listening on: :{config.port}")
    app.run(host='0.0.0.0', port=config.port, threaded=True)
