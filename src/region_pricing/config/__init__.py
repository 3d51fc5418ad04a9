"""Configuration subpackage - settings and user-facing labels."""
from .settings import Settings, Labels, get_settings

__all__ = ['Settings', 'Labels', 'get_settings']
