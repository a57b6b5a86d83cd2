"""Error tracking and monitoring setup."""
import logging
from typing import Optional

import sentry_sdk
from sentry_sdk.integrations.logging import LoggingIntegration

from placeshape.core import config


def filter_sensitive_data(event, hint):
    """Filter sensitive data from Sentry events."""
    # Remove API keys, tokens, passwords, etc.
    if event.get('request'):
        if 'headers' in event.get('request', {}):
            sensitive_headers = ['authorization', 'api-key', 'x-api-key', 'x-auth-token',
                                 'cookie', 'set-cookie', 'password', 'secret']
            event['request']['headers'] = {
                k: '***REDACTED***' if k.lower() in sensitive_headers else v
                for k, v in event['request']['headers'].items()
            }

    # Filter environment variables that might contain secrets
    if 'environment' in event:
        env = event['environment']
        if isinstance(env, dict):
            sensitive_env_vars = ['API_KEY', 'SECRET', 'PASSWORD', 'TOKEN', 'AUTH', 'DSN']
            for key in list(env.keys()):
                if any(sensitive in key.upper() for sensitive in sensitive_env_vars):
                    env[key] = '***REDACTED***'

    return event


def setup_error_tracking(
    dsn: Optional[str] = None,
    environment: Optional[str] = None,
    release: Optional[str] = None,
    traces_sample_rate: float = 0.0
) -> bool:
    """
    Setup Sentry error tracking.

    Args:
        dsn: Sentry DSN (defaults to config.SENTRY_DSN)
        environment: Environment name (defaults to config.ENVIRONMENT)
        release: Release version (defaults to config.RELEASE)
        traces_sample_rate: Percentage of transactions to trace (0.0 to 1.0)

    Returns:
        True if Sentry was initialized, False otherwise
    """
    dsn = dsn or config.SENTRY_DSN
    if not dsn:
        logging.info("Sentry DSN not provided. Error tracking disabled.")
        return False

    environment = environment or config.ENVIRONMENT
    release = release or config.RELEASE

    sentry_sdk.init(
        dsn=dsn,
        environment=environment,
        release=release,
        integrations=[
            LoggingIntegration(level=logging.INFO, event_level=logging.ERROR),
        ],
        traces_sample_rate=traces_sample_rate,
        before_send=filter_sensitive_data,
        attach_stacktrace=True,
        send_default_pii=False,
        debug=config.SENTRY_DEBUG,
    )

    logging.info(f"Sentry error tracking initialized for environment: {environment}")
    return True


def capture_exception(error: Exception, context: Optional[dict] = None) -> bool:
    """Capture exception and send to Sentry if it was initialized."""
    if not sentry_sdk.get_client().is_active():
        return False

    with sentry_sdk.new_scope() as scope:
        if context:
            for key, value in context.items():
                scope.set_context(key, {"value": str(value)})
        sentry_sdk.capture_exception(error)
    return True
