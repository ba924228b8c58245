"""
InsightChef Core
================

Core configuration, settings and error taxonomy.
"""

from .config import Settings, get_settings
from .errors import (
    InsightChefError,
    InputValidationError,
    ServiceNotConfiguredError,
    UnexpectedError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)

__all__ = [
    "Settings",
    "get_settings",
    "InsightChefError",
    "InputValidationError",
    "ServiceNotConfiguredError",
    "UnexpectedError",
    "UpstreamTimeoutError",
    "UpstreamUnavailableError",
]
