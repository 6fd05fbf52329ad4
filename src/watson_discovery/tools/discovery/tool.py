from __future__ import annotations

from langchain_core.tools import StructuredTool
from pydantic import BaseModel, Field

from watson_discovery.tools.discovery.adapter import DiscoveryQueryAdapter


class WatsonDiscoveryInput(BaseModel):
    query: str = Field(description="Search query, preferably in keyword form.")


def create_watson_discovery_tool(adapter: DiscoveryQueryAdapter) -> StructuredTool:
    """Wrap the adapter as a LangChain tool. Errors propagate to the agent framework."""

    def watson_discovery(query: str) -> str:
        return adapter.query(query)

    async def awatson_discovery(query: str) -> str:
        return await adapter.aquery(query)

    return StructuredTool.from_function(
        func=watson_discovery,
        coroutine=awatson_discovery,
        name=adapter.name,
        description=adapter.description,
        args_schema=WatsonDiscoveryInput,
    )
