from __future__ import annotations

from typing import Any

from watson_discovery.core.contracts.node import CredentialDescriptor, NodeData, NodeDescriptor
from watson_discovery.credentials.ibm_iam import IBM_IAM_CREDENTIAL, CredentialStore
from watson_discovery.nodes.watson_discovery import WatsonDiscoveryNode

_NODES: dict[str, Any] = {
    WatsonDiscoveryNode.descriptor.name: WatsonDiscoveryNode,
}

_CREDENTIALS: dict[str, CredentialDescriptor] = {
    IBM_IAM_CREDENTIAL.name: IBM_IAM_CREDENTIAL,
}


def get_node(name: str) -> Any:
    if name not in _NODES:
        raise KeyError(f"Unknown node {name}")
    return _NODES[name]()


def get_credential(name: str) -> CredentialDescriptor:
    if name not in _CREDENTIALS:
        raise KeyError(f"Unknown credential {name}")
    return _CREDENTIALS[name]


def list_nodes() -> list[NodeDescriptor]:
    return [cls.descriptor for cls in _NODES.values()]


def get_tools(node_configs: list[tuple[str, NodeData]], credential_store: CredentialStore) -> list[Any]:
    """Build a LangChain tool for each (node name, node data) pair."""
    return [get_node(name).init(node_data, credential_store) for name, node_data in node_configs]
