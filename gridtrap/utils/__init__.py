"""Utility modules"""
from .config import Settings, settings
from .log import setup_logging
from .state_persistence import StatePersistence

__all__ = [
    'Settings',
    'settings',
    'setup_logging',
    'StatePersistence'
]
