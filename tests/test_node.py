from unittest.mock import Mock

import pytest

from watson_discovery.core.contracts.node import NodeData
from watson_discovery.core.exceptions import ConfigurationError
from watson_discovery.credentials.ibm_iam import (
    IBM_IAM_CREDENTIAL,
    EnvCredentialStore,
    InMemoryCredentialStore,
    get_credential_param,
)
from watson_discovery.nodes.watson_discovery import DESCRIPTOR, WatsonDiscoveryNode
from watson_discovery.tools.registry import get_credential, get_node, get_tools, list_nodes


def test_descriptor_host_record():
    record = DESCRIPTOR.to_host()
    assert record["name"] == "watsonDiscovery"
    assert record["label"] == "Watson Discovery"
    assert record["category"] == "Tools"
    assert record["icon"] == "ibmlogo.png"
    assert record["version"] == 1.0
    assert record["baseClasses"][0] == "WatsonDiscovery"
    assert record["credential"] == {
        "label": "Connect Credential",
        "name": "credential",
        "type": "credential",
        "optional": False,
        "additionalParams": False,
        "credentialNames": ["ibmIamApiKey"],
    }
    names = [p["name"] for p in record["inputs"]]
    assert names == [
        "url",
        "projectId",
        "resultCount",
        "description",
        "apiVersion",
        "collectionIds",
        "passagesCharacters",
        "passagesMaxPerDocument",
    ]
    by_name = {p["name"]: p for p in record["inputs"]}
    assert by_name["resultCount"]["default"] == 10
    assert by_name["resultCount"]["type"] == "number"
    assert by_name["url"]["optional"] is False
    assert by_name["passagesCharacters"]["additionalParams"] is True


def test_credential_descriptor():
    record = IBM_IAM_CREDENTIAL.to_host()
    assert record["name"] == "ibmIamApiKey"
    assert record["inputs"][0]["type"] == "password"


def test_init_builds_tool_from_stored_credential(base_inputs):
    store = InMemoryCredentialStore({"cred-1": {"ibmIamApiKey": "stored-key"}})
    tool = WatsonDiscoveryNode().init(NodeData(credential="cred-1", inputs=base_inputs), store)
    assert tool.name == "watson_discovery"
    assert tool.description == "Search the handbook"


def test_init_fails_without_api_key(base_inputs):
    store = InMemoryCredentialStore()
    with pytest.raises(ConfigurationError) as exc:
        WatsonDiscoveryNode().init(NodeData(inputs=base_inputs), store)
    assert str(exc.value).startswith("Failed to parse settings:")
    assert "apiKey" in str(exc.value)


def test_init_does_not_build_adapter_on_invalid_settings(base_inputs, monkeypatch):
    adapter_cls = Mock()
    monkeypatch.setattr("watson_discovery.nodes.watson_discovery.DiscoveryQueryAdapter", adapter_cls)
    base_inputs["passagesCharacters"] = 5
    store = InMemoryCredentialStore({"c": {"ibmIamApiKey": "k"}})
    with pytest.raises(ConfigurationError):
        WatsonDiscoveryNode().init(NodeData(credential="c", inputs=base_inputs), store)
    adapter_cls.assert_not_called()


def test_unknown_credential_id():
    with pytest.raises(ConfigurationError):
        InMemoryCredentialStore().get_credential_data("missing")


def test_credential_param_falls_back_to_inputs():
    node_data = NodeData(inputs={"ibmIamApiKey": "from-input"})
    assert get_credential_param("ibmIamApiKey", {}, node_data) == "from-input"
    assert get_credential_param("ibmIamApiKey", {"ibmIamApiKey": "stored"}, node_data) == "stored"


def test_env_credential_store():
    assert EnvCredentialStore({"IBM_IAM_API_KEY": "k"}).get_credential_data("any") == {"ibmIamApiKey": "k"}
    assert EnvCredentialStore({}).get_credential_data(None) == {}


def test_registry_lookup():
    assert isinstance(get_node("watsonDiscovery"), WatsonDiscoveryNode)
    assert get_credential("ibmIamApiKey") is IBM_IAM_CREDENTIAL
    assert [d.name for d in list_nodes()] == ["watsonDiscovery"]
    with pytest.raises(KeyError):
        get_node("serpApi")
    with pytest.raises(KeyError):
        get_credential("openAIApi")


def test_get_tools(base_inputs):
    store = InMemoryCredentialStore({"c": {"ibmIamApiKey": "k"}})
    tools = get_tools([("watsonDiscovery", NodeData(credential="c", inputs=base_inputs))], store)
    assert [t.name for t in tools] == ["watson_discovery"]
