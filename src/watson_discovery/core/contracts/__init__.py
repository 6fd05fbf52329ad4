from watson_discovery.core.contracts.discovery import (
    DocumentPassage,
    PassagesOptions,
    QueryRequest,
    QueryResponse,
    QueryResult,
)
from watson_discovery.core.contracts.node import CredentialDescriptor, NodeData, NodeDescriptor, NodeParam

__all__ = [
    "QueryRequest",
    "QueryResponse",
    "QueryResult",
    "PassagesOptions",
    "DocumentPassage",
    "NodeParam",
    "NodeDescriptor",
    "CredentialDescriptor",
    "NodeData",
]
