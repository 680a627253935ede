"""
Utility modules for the notice service
"""
from .config_loader import AppConfig, load_app_config

__all__ = [
    'AppConfig',
    'load_app_config',
]
