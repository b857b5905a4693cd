"""
Configuration for Alert Relay
Environment-driven settings for the webhook server and notification channels
"""

import os
import logging
from pathlib import Path
from types import SimpleNamespace

from dotenv import load_dotenv

load_dotenv()

# Server
DEFAULT_PORT = 8080

# Gmail (OAuth client + pre-provisioned token live under CREDENTIALS_DIR)
CREDENTIALS_DIR = Path(os.getenv('CREDENTIALS_DIR', 'config'))
CLIENT_SECRET_FILENAME = 'client_secret.json'
TOKEN_FILENAME = 'token.json'
GMAIL_SCOPE = 'https://mail.google.com/'
GMAIL_FROM = os.getenv('GMAIL_FROM', '')
EMAIL_SUBJECT = 'ICP Email Notification'

# SMS via Twilio
TWILIO_ACCOUNT = os.getenv('TWILIO_ACCOUNT', '')
TWILIO_TOKEN = os.getenv('TWILIO_TOKEN', '')
TWILIO_FROM = os.getenv('TWILIO_FROM', '')

# Logging configuration
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE = os.getenv('LOG_FILE')


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger instance"""
    logger = logging.getLogger(name)

    if not logger.handlers:
        formatter = logging.Formatter(LOG_FORMAT)

        # Console handler
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        # File handler (optional)
        if LOG_FILE:
            log_file = Path(LOG_FILE)
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        logger.setLevel(getattr(logging, LOG_LEVEL.upper(), logging.INFO))

    return logger


def get_config():
    """Get configuration as a namespace object, read from the environment at call time"""
    config = SimpleNamespace()

    # Server
    config.port = int(os.getenv('PORT') or DEFAULT_PORT)

    # Gmail settings
    credentials_dir = Path(os.getenv('CREDENTIALS_DIR', str(CREDENTIALS_DIR)))
    config.client_secret_file = credentials_dir / CLIENT_SECRET_FILENAME
    config.token_file = credentials_dir / TOKEN_FILENAME
    config.gmail_from = os.getenv('GMAIL_FROM', GMAIL_FROM)
    config.email_subject = EMAIL_SUBJECT

    # SMS settings
    config.twilio_account = os.getenv('TWILIO_ACCOUNT', TWILIO_ACCOUNT)
    config.twilio_token = os.getenv('TWILIO_TOKEN', TWILIO_TOKEN)
    config.twilio_from = os.getenv('TWILIO_FROM', TWILIO_FROM)

    return config
