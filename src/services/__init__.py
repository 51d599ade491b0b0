"""
Utility functions for Lambda handler operations.

This package contains reusable service functions for environment
configuration and API Gateway request/response handling.
"""

__all__ = ['config', 'responses']
