"""
Environment configuration for the contact intake Lambda.

All settings are read from environment variables once, at cold start.
"""

import os
from dataclasses import dataclass

DEFAULT_REGION = 'us-west-2'


class ConfigurationError(Exception):
    """Raised when module configuration is invalid or missing."""
    pass


@dataclass(frozen=True)
class AppConfig:
    """
    Process-wide settings.

    Attributes:
        topic_arn: SNS topic that receives validated submissions
        allowed_origin: Value of Access-Control-Allow-Origin
        environment: Deployment stage (dev, staging, prod, ...)
        log_level: Root logger level name
        region: AWS region for the SNS client
    """
    topic_arn: str
    allowed_origin: str = '*'
    environment: str = 'dev'
    log_level: str = 'INFO'
    region: str = DEFAULT_REGION


def _read_topic_arn() -> str:
    """
    Read and validate CONTACT_TOPIC_ARN from environment variables.

    Returns:
        str: The validated topic ARN

    Raises:
        ConfigurationError: If CONTACT_TOPIC_ARN is missing or invalid
    """
    topic_arn = os.environ.get('CONTACT_TOPIC_ARN', '').strip()

    if not topic_arn:
        raise ConfigurationError(
            "CONTACT_TOPIC_ARN environment variable is required but not set. "
            "Please configure this in your SAM template or Lambda environment."
        )

    if not topic_arn.startswith('arn:aws:sns:'):
        raise ConfigurationError(
            f"CONTACT_TOPIC_ARN has invalid format. "
            f"Expected ARN starting with 'arn:aws:sns:', "
            f"got: '{topic_arn[:50]}...'"
        )

    return topic_arn


def load_config() -> AppConfig:
    """
    Build AppConfig from the current environment.

    Raises:
        ConfigurationError: If a required variable is missing or invalid
    """
    return AppConfig(
        topic_arn=_read_topic_arn(),
        allowed_origin=os.environ.get('ALLOWED_ORIGIN') or '*',
        environment=os.environ.get('ENVIRONMENT', 'dev'),
        log_level=os.environ.get('LOG_LEVEL', 'INFO').upper(),
        region=os.environ.get('AWS_REGION', os.environ.get('AWS_DEFAULT_REGION', DEFAULT_REGION)),
    )
