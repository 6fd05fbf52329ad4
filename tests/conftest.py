"""Shared fixtures: raw node inputs, validated settings and a recording httpx transport."""
import json

import httpx
import pytest

from watson_discovery.core.config.loader import load_settings

_SAMPLE_RESPONSE = {
    "matching_results": 1,
    "results": [
        {
            "document_id": "d1",
            "result_metadata": {"confidence": 0.9, "collection_id": "c1"},
            "document_passages": [{"passage_text": "Hello", "field": "text"}],
            "metadata": {"source": {"url": "http://x"}},
        }
    ],
}


@pytest.fixture
def base_inputs():
    return {
        "url": "https://api.eu-de.discovery.watson.cloud.ibm.com/instances/abc",
        "projectId": "proj-1",
        "resultCount": 3,
        "apiVersion": "2023-03-31",
        "description": "Search the handbook",
    }


@pytest.fixture
def settings(base_inputs):
    return load_settings(base_inputs, api_key="secret-key")


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, status_code=200, payload=None, content=None):
        self.requests = []

        def handler(request):
            self.requests.append(request)
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=payload)

        super().__init__(handler)

    def last_body(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture
def make_transport():
    return RecordingTransport


@pytest.fixture
def sample_response():
    return json.loads(json.dumps(_SAMPLE_RESPONSE))
