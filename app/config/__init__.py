"""Configuration module for the DevOps API client."""
from .settings import DevOpsConfig, load_settings

__all__ = ["DevOpsConfig", "load_settings"]
