"""Configuration infrastructure - loading."""

from .yaml_loader import YAMLConfigLoader

__all__ = [
    "YAMLConfigLoader",
]
