from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

DEFAULT_API_VERSION = "2023-03-31"

DEFAULT_DESCRIPTION = (
    "This tool lets you look up information in a Watson Discovery project. "
    "Rephrase the question so that it is in keyword form before searching. "
    "The results include the URLs of the sources, which you should include in your response when applicable."
)


def _coerce_int(value: Any) -> Any:
    """Accept ints, integral floats and numeric strings; blank strings mean unset."""
    if value is None or isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, bool):
        raise ValueError("expected a number, got a boolean")
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if "_" in text:
            raise ValueError(f"expected a number, got {value!r}")
        try:
            return int(text)
        except ValueError:
            pass
        try:
            value = float(text)
        except ValueError:
            raise ValueError(f"expected a number, got {value!r}") from None
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"expected a whole number, got {value}")
        return int(value)
    return value


class WatsonDiscoverySettings(BaseModel):
    """Validated node settings. Input keys are the host's camelCase field names."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    url: str
    project_id: str = Field(alias="projectId")
    api_key: SecretStr = Field(alias="apiKey")
    result_count: int = Field(alias="resultCount", ge=0)
    api_version: str = Field(default=DEFAULT_API_VERSION, alias="apiVersion")
    description: str = DEFAULT_DESCRIPTION
    collection_ids: list[str] = Field(default_factory=list, alias="collectionIds")
    passages_characters: int | None = Field(default=None, alias="passagesCharacters", ge=50, le=2000)
    passages_max_per_document: int | None = Field(default=None, alias="passagesMaxPerDocument", ge=0)

    @field_validator("result_count", "passages_characters", "passages_max_per_document", mode="before")
    @classmethod
    def _numeric(cls, value: Any) -> Any:
        return _coerce_int(value)

    @field_validator("collection_ids", mode="before")
    @classmethod
    def _split_collection_ids(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            value = value.split(",")
        if isinstance(value, (list, tuple)):
            return [v.strip() if isinstance(v, str) else v for v in value if not isinstance(v, str) or v.strip()]
        return value

    @field_validator("url", mode="after")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        # The query path is appended with its own leading slash.
        return value.rstrip("/")

    @field_validator("api_version", mode="before")
    @classmethod
    def _default_api_version(cls, value: Any) -> Any:
        return DEFAULT_API_VERSION if value is None or value == "" else value

    @field_validator("description", mode="before")
    @classmethod
    def _default_description(cls, value: Any) -> Any:
        return DEFAULT_DESCRIPTION if value is None or value == "" else value

    @property
    def passages_enabled(self) -> bool:
        return bool(self.passages_characters or self.passages_max_per_document)
