import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from watson_discovery.core.config.models import WatsonDiscoverySettings
from watson_discovery.core.exceptions import ConfigurationError

log = logging.getLogger("watson_discovery.config")


def _describe_errors(exc: ValidationError) -> list[dict[str, Any]]:
    # Inputs are left out so a rejected API key never ends up in a message.
    return [
        {"field": ".".join(str(p) for p in err["loc"]) or "settings", "message": err["msg"], "type": err["type"]}
        for err in exc.errors(include_url=False)
    ]


def load_settings(inputs: Mapping[str, Any], api_key: str | None = None) -> WatsonDiscoverySettings:
    """Validate raw node inputs (plus the resolved API key) into settings.

    Raises ConfigurationError naming every invalid or missing field.
    """
    data = dict(inputs)
    if api_key is not None:
        data["apiKey"] = api_key
    try:
        settings = WatsonDiscoverySettings.model_validate(data)
    except ValidationError as e:
        errors = _describe_errors(e)
        lines = "\n".join(f"  - {err['field']}: {err['message']}" for err in errors)
        raise ConfigurationError(f"Invalid Watson Discovery settings:\n{lines}", errors=errors) from e
    log.info("Settings %r", settings)
    return settings
