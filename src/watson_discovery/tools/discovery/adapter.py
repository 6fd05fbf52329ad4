"""Query a Watson Discovery project and format the matched passages for an agent."""
from __future__ import annotations

import base64
import json
import logging
import math
import time
from decimal import Decimal
from typing import Any

import httpx
from pydantic import ValidationError

from watson_discovery.core.config.models import WatsonDiscoverySettings
from watson_discovery.core.contracts.discovery import PassagesOptions, QueryRequest, QueryResponse
from watson_discovery.core.exceptions import ResponseShapeError, TransportError

log = logging.getLogger("watson_discovery.adapter")

TOOL_NAME = "watson_discovery"
PARSE_FAILURE = "Failed to parse response from Watson Discovery. See logs for more info."


def _format_score(confidence: int | float) -> str:
    """Render a score the way the service's JSON number reads: 1.0 -> "1", 3e-05 -> "0.00003"."""
    if isinstance(confidence, int) or not math.isfinite(confidence):
        return str(confidence)
    if confidence == 0 or 1e-7 <= abs(confidence) < 1e21:
        text = f"{Decimal(repr(confidence)):f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return "0" if text in ("", "-0") else text
    mantissa, exponent = repr(confidence).split("e")
    exp = int(exponent)
    return f"{mantissa}e{'+' if exp > 0 else '-'}{abs(exp)}"


def format_response(response: QueryResponse) -> str:
    """One block per result, in service order. No results -> empty string."""
    blocks = []
    for index, result in enumerate(response.results, 1):
        passages = "\n".join(p.passage_text for p in result.document_passages)
        score = _format_score(result.result_metadata.confidence)
        blocks.append(
            f"\nDocument {index} - score: {score}:\nSource URL: {result.metadata.source.url}\n{passages}\n"
        )
    return "\n".join(blocks)


class DiscoveryQueryAdapter:
    """Stateless request/response adapter over the Discovery v2 query endpoint.

    Holds only the immutable settings, so one instance can serve concurrent calls.
    Every call opens its own httpx client; there is no retry and no timeout override.
    """

    name = TOOL_NAME

    def __init__(
        self,
        settings: WatsonDiscoverySettings,
        transport: httpx.BaseTransport | None = None,
        async_transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings
        self.description = settings.description
        # query() uses transport, aquery() uses async_transport; None means the httpx default.
        self._transport = transport
        self._async_transport = async_transport

    def build_url(self) -> str:
        s = self.settings
        return f"{s.url}/v2/projects/{s.project_id}/query?version={s.api_version}"

    def build_body(self, query: str) -> dict[str, Any]:
        s = self.settings
        passages = None
        if s.passages_enabled:
            # Falsy values are dropped, so a zero max_per_document counts as unset.
            passages = PassagesOptions(
                characters=s.passages_characters or None,
                per_document=True if s.passages_max_per_document else None,
                max_per_document=s.passages_max_per_document or None,
            )
        request = QueryRequest(
            count=s.result_count,
            natural_language_query=query,
            collection_ids=list(s.collection_ids),
            passages=passages,
        )
        return request.to_body()

    def auth_header(self) -> str:
        token = base64.b64encode(f"apikey:{self.settings.api_key.get_secret_value()}".encode("utf-8"))
        return f"Basic {token.decode('ascii')}"

    def _headers(self) -> dict[str, str]:
        return {"Content-Type": "application/json", "Authorization": self.auth_header()}

    @staticmethod
    def _client_kwargs(transport: Any) -> dict[str, Any]:
        return {"transport": transport} if transport is not None else {}

    def query(self, query: str) -> str:
        """Run one query and return the formatted passages."""
        url = self.build_url()
        body = self.build_body(query)
        log.debug("Request body %s", body)
        start = time.perf_counter()
        with httpx.Client(**self._client_kwargs(self._transport)) as client:
            r = client.post(url, json=body, headers=self._headers())
        return self._handle_response(r, start)

    async def aquery(self, query: str) -> str:
        """Async variant of query(); suspends only the calling task."""
        url = self.build_url()
        body = self.build_body(query)
        log.debug("Request body %s", body)
        start = time.perf_counter()
        async with httpx.AsyncClient(**self._client_kwargs(self._async_transport)) as client:
            r = await client.post(url, json=body, headers=self._headers())
        return self._handle_response(r, start)

    def _handle_response(self, r: httpx.Response, start: float) -> str:
        latency_ms = int((time.perf_counter() - start) * 1000)
        try:
            data = r.json()
        except ValueError:
            data = None
        if r.status_code != 200:
            log.warning("Got error response: HTTP %s (%s ms)", r.status_code, latency_ms)
            log.warning("%s", data if data is not None else r.text)
            detail = json.dumps(data, indent=2) if data is not None else r.text
            raise TransportError(
                f"The tool failed with the following exception: {detail}",
                status_code=r.status_code,
                body=data if data is not None else r.text,
            )
        log.info("Took %s ms to get response", latency_ms)
        if data is None:
            log.warning("Response body is not JSON: %s", r.text[:500])
            raise ResponseShapeError(PARSE_FAILURE, details="response body is not JSON")
        try:
            parsed = QueryResponse.model_validate(data)
        except ValidationError as e:
            details = e.errors(include_url=False)
            log.warning("Unexpected response shape: %s", json.dumps(details, indent=2, default=str))
            raise ResponseShapeError(PARSE_FAILURE, details=details) from e
        log.info("Result count: %s", len(parsed.results))
        log.info(
            "Passages & lengths: %s",
            [[len(p.passage_text) for p in result.document_passages] for result in parsed.results],
        )
        return format_response(parsed)
