from watson_discovery.core.config.loader import load_settings
from watson_discovery.core.config.models import DEFAULT_API_VERSION, DEFAULT_DESCRIPTION, WatsonDiscoverySettings
from watson_discovery.core.config.env import get_env_vars, settings_inputs_from_env

__all__ = [
    "load_settings",
    "WatsonDiscoverySettings",
    "DEFAULT_API_VERSION",
    "DEFAULT_DESCRIPTION",
    "get_env_vars",
    "settings_inputs_from_env",
]
