"""Watson Discovery tool node: registration descriptor and init contract."""
from __future__ import annotations

import logging

from langchain_core.tools import StructuredTool

from watson_discovery.core.config.loader import load_settings
from watson_discovery.core.config.models import DEFAULT_API_VERSION, DEFAULT_DESCRIPTION
from watson_discovery.core.contracts.node import NodeData, NodeDescriptor, NodeParam
from watson_discovery.core.exceptions import ConfigurationError
from watson_discovery.credentials.ibm_iam import CREDENTIAL_NAME, CredentialStore, get_credential_param
from watson_discovery.tools.discovery.adapter import DiscoveryQueryAdapter
from watson_discovery.tools.discovery.tool import create_watson_discovery_tool

log = logging.getLogger("watson_discovery.node")

NODE_NAME = "watsonDiscovery"
NODE_TYPE = "WatsonDiscovery"

# Static capability tags; the host matches these against the edges a tool can connect to.
BASE_CLASSES = [NODE_TYPE, "WatsonDiscoveryTool", "StructuredTool", "BaseTool", "Runnable"]

INPUTS = [
    NodeParam(
        label="Base URL",
        name="url",
        type="string",
        description="The URL to the Watson discovery instance: https://api.{region}.discovery.watson.cloud.ibm.com/instances/{instance_id}",
    ),
    NodeParam(
        label="Project ID",
        name="projectId",
        type="string",
        description="The ID of the Watson Discovery project",
    ),
    NodeParam(
        label="Result count",
        name="resultCount",
        type="number",
        description="The number of documents to retrieve from Watson Discovery",
        default=10,
    ),
    NodeParam(
        label="Description",
        name="description",
        type="string",
        description="Acts like a prompt to tell agent when it should use this tool",
        default=DEFAULT_DESCRIPTION,
        optional=True,
        rows=4,
    ),
    NodeParam(
        label="API version",
        name="apiVersion",
        type="string",
        description="Watson Discovery API version date, YYYY-MM-DD",
        default=DEFAULT_API_VERSION,
        optional=True,
        additional_params=True,
    ),
    NodeParam(
        label="Collection IDs",
        name="collectionIds",
        type="string",
        description="Comma separated collection IDs to limit the search to. Leave empty to search the whole project",
        optional=True,
        additional_params=True,
    ),
    NodeParam(
        label="Passage characters",
        name="passagesCharacters",
        type="number",
        description="Approximate number of characters per passage (50-2000)",
        optional=True,
        additional_params=True,
    ),
    NodeParam(
        label="Max passages per document",
        name="passagesMaxPerDocument",
        type="number",
        description="Maximum number of passages returned per document",
        optional=True,
        additional_params=True,
    ),
]

DESCRIPTOR = NodeDescriptor(
    label="Watson Discovery",
    name=NODE_NAME,
    version=1.0,
    type=NODE_TYPE,
    icon="ibmlogo.png",
    category="Tools",
    description="Look up information in Watson Discovery",
    base_classes=BASE_CLASSES,
    credential=NodeParam(
        label="Connect Credential",
        name="credential",
        type="credential",
        credential_names=[CREDENTIAL_NAME],
    ),
    inputs=INPUTS,
)


class WatsonDiscoveryNode:
    descriptor = DESCRIPTOR

    def init(self, node_data: NodeData, credential_store: CredentialStore) -> StructuredTool:
        """Resolve the API key, validate settings and build the tool. Nothing is built on failure."""
        credential_data = credential_store.get_credential_data(node_data.credential)
        api_key = get_credential_param(CREDENTIAL_NAME, credential_data, node_data)
        try:
            settings = load_settings(node_data.inputs, api_key)
        except ConfigurationError as e:
            raise ConfigurationError(f"Failed to parse settings: {e}", errors=e.errors) from e
        adapter = DiscoveryQueryAdapter(settings)
        log.info("Built %s tool for project %s", adapter.name, settings.project_id)
        return create_watson_discovery_tool(adapter)
