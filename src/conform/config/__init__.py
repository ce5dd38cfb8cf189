"""Configuration for conform.

Settings classes are pydantic-settings models loaded from the environment.
"""

from conform.config.settings import DEFAULT_DISCRIMINATOR_GROUP, TemplateSettings

__all__ = [
    "DEFAULT_DISCRIMINATOR_GROUP",
    "TemplateSettings",
]
