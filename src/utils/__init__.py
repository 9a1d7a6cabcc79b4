"""
Utility modules for the store backend
"""
from .config_loader import ConfigurationError, Settings, load_settings

__all__ = [
    'ConfigurationError',
    'Settings',
    'load_settings',
]
