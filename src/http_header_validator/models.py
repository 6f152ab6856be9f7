from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

HeaderMap = dict[str, list[str] | None]
"""Header name to ordered list of values. A ``None`` value leaves the header unset when merging."""


class Spec(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    url: str = Field(
        default="",
        description="URL to request with GET. Ignored for the default spec.",
        examples=["https://example.com/", "http://localhost:8080/login"],
    )
    request_headers: HeaderMap = Field(
        default_factory=dict,
        alias="requestHeaders",
        description="Headers sent with the request.",
        examples=[{"Accept-Language": ["en"]}],
    )
    response_headers: HeaderMap = Field(
        default_factory=dict,
        alias="responseHeaders",
        description='Expected response headers. [""] means the header must be absent.',
        examples=[{"X-Frame-Options": ["SAMEORIGIN"]}, {"Set-Cookie": [""]}],
    )

    @field_validator("url", "request_headers", "response_headers", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None:
            return "" if info.field_name == "url" else {}
        return v


class SpecContainer(BaseModel):
    """Contents of one spec file: a default spec merged into every per-URL spec."""

    model_config = ConfigDict(frozen=True)

    default: Spec = Field(default_factory=Spec, description="Headers shared by every spec in the file.")
    specs: list[Spec] = Field(default_factory=list, description="Per-URL specs, validated in order.")

    @field_validator("default", "specs", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None:
            return {} if info.field_name == "default" else []
        return v


def spec_file_schema() -> dict[str, Any]:
    """JSON Schema of the spec file format, for editor support."""
    schema = SpecContainer.model_json_schema(by_alias=True)
    schema["$schema"] = "https://json-schema.org/draft/2020-12/schema"
    return schema
