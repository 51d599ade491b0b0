"""
Pytest configuration and fixtures for all tests.
"""

import os
import sys
import pytest

# Add src and hooks to Python path before any imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../src'))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../hooks'))

# Set up test environment variables before importing any modules
os.environ.setdefault('CONTACT_TOPIC_ARN', 'arn:aws:sns:us-west-2:123456789012:contact-inquiries-test')
os.environ.setdefault('ALLOWED_ORIGIN', 'https://example.com')
os.environ.setdefault('ENVIRONMENT', 'test')
os.environ.setdefault('LOG_LEVEL', 'INFO')
os.environ.setdefault('AWS_DEFAULT_REGION', 'us-west-2')


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Set up test environment variables for all tests."""
    # Environment variables are already set above
    yield
