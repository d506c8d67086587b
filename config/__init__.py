"""Configuration module for named usage profiles."""

from .loader import ConfigLoader, load_profiles

__all__ = ['ConfigLoader', 'load_profiles']
