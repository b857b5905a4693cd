#!/usr/bin/env python3
"""
Alert Relay CLI Entry Point
"""

import sys
import logging
import argparse

from .config import get_config, get_logger

get_logger('alert_relay')
logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(description='Alertmanager webhook to email/SMS relay')
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Serve command
    subparsers.add_parser('serve', help='Run the webhook server (default)')

    # Check command
    subparsers.add_parser('check', help='Check Gmail and Twilio credentials without sending')

    args = parser.parse_args(argv)
    config = get_config()

    if args.command == 'check':
        from .alerts import AlertManager
        results = AlertManager.from_config(config).test_channels()

        print("\n=== Alert Channel Check ===")
        for name, ok in results.items():
            status = "OK" if ok else "FAILED"
            print(f"{name}: {status}")
        return 0 if all(results.values()) else 1

    from .server import serve
    logger.info("Starting Alert Relay...")
    try:
        serve(config)
    except OSError as e:
        logger.critical(f"HTTP listener failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
