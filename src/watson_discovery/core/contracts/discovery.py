from __future__ import annotations

from pydantic import BaseModel, Field, StrictFloat, StrictInt


class PassagesOptions(BaseModel):
    enabled: bool = True
    characters: int | None = None
    per_document: bool | None = None
    max_per_document: int | None = None


class QueryRequest(BaseModel):
    count: int
    natural_language_query: str
    collection_ids: list[str] = Field(default_factory=list)
    passages: PassagesOptions | None = None

    def to_body(self) -> dict:
        """JSON body for the query endpoint. Unset fields are dropped, never sent as null."""
        return self.model_dump(exclude_none=True)


class ResultMetadata(BaseModel):
    confidence: StrictInt | StrictFloat


class DocumentPassage(BaseModel):
    passage_text: str


class Source(BaseModel):
    url: str


class ResultSourceMetadata(BaseModel):
    source: Source


class QueryResult(BaseModel):
    result_metadata: ResultMetadata
    document_passages: list[DocumentPassage]
    metadata: ResultSourceMetadata


class QueryResponse(BaseModel):
    results: list[QueryResult]
