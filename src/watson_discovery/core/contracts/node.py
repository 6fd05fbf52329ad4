from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

ParamType = Literal["string", "number", "password", "credential"]


class NodeParam(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    label: str
    name: str
    type: ParamType
    description: str | None = None  # help text shown next to the input
    default: Any = None
    optional: bool = False
    additional_params: bool = Field(default=False, alias="additionalParams")
    rows: int | None = None
    credential_names: list[str] | None = Field(default=None, alias="credentialNames")


class CredentialDescriptor(BaseModel):
    label: str
    name: str
    version: float
    inputs: list[NodeParam] = Field(default_factory=list)

    def to_host(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class NodeDescriptor(BaseModel):
    """Static registration record the host plugin system reads."""

    model_config = ConfigDict(populate_by_name=True)

    label: str
    name: str
    version: float
    type: str
    icon: str
    category: str
    description: str
    base_classes: list[str] = Field(alias="baseClasses")
    credential: NodeParam
    inputs: list[NodeParam] = Field(default_factory=list)

    def to_host(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class NodeData(BaseModel):
    """What the host hands to a node's init: the id of the stored credential and the raw inputs."""

    credential: str | None = None
    inputs: dict[str, Any] = Field(default_factory=dict)
