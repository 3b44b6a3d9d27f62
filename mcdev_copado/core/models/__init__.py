"""
Domain models — Pydantic types for the Copado helper layer.

All models are re-exported here for convenient access:

    from mcdev_copado.core.models import CentralConfig, EnvVar, CredentialConfig
"""

from mcdev_copado.core.models.config import CentralConfig
from mcdev_copado.core.models.env_vars import EnvChildVar, EnvVar, SourceProperty
from mcdev_copado.core.models.mcdev_config import CredentialConfig

__all__ = [
    # config.py
    "CentralConfig",
    # mcdev_config.py
    "CredentialConfig",
    # env_vars.py
    "EnvChildVar",
    "EnvVar",
    "SourceProperty",
]
