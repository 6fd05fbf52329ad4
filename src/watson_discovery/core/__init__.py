from watson_discovery.core.config.loader import load_settings
from watson_discovery.core.config.models import WatsonDiscoverySettings
from watson_discovery.core.exceptions import (
    ConfigurationError,
    ResponseShapeError,
    TransportError,
    WatsonDiscoveryError,
)

__all__ = [
    "load_settings",
    "WatsonDiscoverySettings",
    "WatsonDiscoveryError",
    "ConfigurationError",
    "TransportError",
    "ResponseShapeError",
]
