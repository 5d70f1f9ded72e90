"""
Config module - Adapter defaults, overridable through the environment.
"""

from .settings import DEFAULT_SETTINGS, REQUIRED_ENV_VARS

__all__ = [
    'DEFAULT_SETTINGS',
    'REQUIRED_ENV_VARS',
]
