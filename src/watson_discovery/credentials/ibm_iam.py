from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any, Protocol

from watson_discovery.core.config.env import API_KEY_ENV_VAR
from watson_discovery.core.contracts.node import CredentialDescriptor, NodeData, NodeParam
from watson_discovery.core.exceptions import ConfigurationError

CREDENTIAL_NAME = "ibmIamApiKey"

IBM_IAM_CREDENTIAL = CredentialDescriptor(
    label="IBM IAM API key",
    name=CREDENTIAL_NAME,
    version=1.0,
    inputs=[NodeParam(label="IBM IAM API key", name=CREDENTIAL_NAME, type="password")],
)


class CredentialStore(Protocol):
    def get_credential_data(self, credential_id: str | None) -> dict[str, Any]: ...


class InMemoryCredentialStore:
    """Credential data keyed by credential id."""

    def __init__(self, credentials: Mapping[str, Mapping[str, Any]] | None = None):
        self._credentials = {k: dict(v) for k, v in (credentials or {}).items()}

    def get_credential_data(self, credential_id: str | None) -> dict[str, Any]:
        if not credential_id:
            return {}
        if credential_id not in self._credentials:
            raise ConfigurationError(f"Credential {credential_id} not found")
        return dict(self._credentials[credential_id])


class EnvCredentialStore:
    """Resolves the IBM IAM API key from IBM_IAM_API_KEY, whatever the credential id."""

    def __init__(self, env: Mapping[str, str] | None = None):
        self._env = env if env is not None else os.environ

    def get_credential_data(self, credential_id: str | None) -> dict[str, Any]:
        key = self._env.get(API_KEY_ENV_VAR)
        return {CREDENTIAL_NAME: key} if key else {}


def get_credential_param(name: str, credential_data: Mapping[str, Any], node_data: NodeData) -> Any:
    """Value from the stored credential, falling back to a node input of the same name."""
    value = credential_data.get(name)
    if value:
        return value
    return node_data.inputs.get(name)
