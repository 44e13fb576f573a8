"""Data models for endpoints extracted from API description documents.

The schema parser turns every operation of a document into these
models; the tool layer only ever reads them.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict

HTTP_METHODS = ("get", "post", "put", "delete", "patch", "options", "head")


class Param(BaseModel):
    """A single operation parameter (path, query, header, body, ...)."""

    model_config = ConfigDict(frozen=True)

    name: str
    location: str = "query"  # path / query / header / body / cookie
    param_type: str = "string"
    description: str = ""
    required: bool = False
    example: str = ""


class Endpoint(BaseModel):
    """One HTTP operation with synthesized example payloads."""

    model_config = ConfigDict(frozen=True)

    source_document_id: str
    path: str  # /pets/{petId}
    operation_id: str
    method: str  # GET / POST / PUT / DELETE / PATCH / OPTIONS / HEAD
    summary: str = ""
    description: str = ""
    parameters: list[Param] = []
    request_body_example: Any = {}
    success_example_response: Any = {}
    error_example_response: Any = {}
