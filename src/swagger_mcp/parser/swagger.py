"""OpenAPI / Swagger document parser.

Turns the operations of one parsed document into Endpoint models with
example request and response payloads.
"""

import copy
import json
import logging
import re
from typing import Any

from .access import as_mapping, get_list, get_mapping, get_path, get_str
from .base import HTTP_METHODS, Endpoint, Param
from .sample import Clock, SampleSynthesizer

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"

DEFAULT_ERROR_EXAMPLE = {"error": {"code": 400, "message": "Bad Request"}}

_TYPE_EXAMPLES = {
    "string": "example_string",
    "integer": "123",
    "number": "123.45",
    "boolean": "true",
}

_LEADING_INT = re.compile(r"\s*[+-]?\d+")


class SwaggerParser:
    """Extracts endpoints from one API description document."""

    def __init__(self, name: str, document: Any, clock: Clock | None = None):
        self.name = name
        self.document = document
        self.sampler = SampleSynthesizer(document, clock=clock)

    def list_endpoints(self) -> list[Endpoint]:
        """Build an Endpoint for every operation, in document order."""
        endpoints = []
        paths = get_mapping(self.document, "paths")

        for path, path_item in paths.items():
            if not isinstance(path_item, dict):
                logger.debug("Skipping non-object path item %s in %s", path, self.name)
                continue
            for method, operation in path_item.items():
                if method not in HTTP_METHODS:
                    logger.debug("Skipping key %r under %s", method, path)
                    continue
                endpoints.append(self._parse_operation(str(path), method, as_mapping(operation)))

        return endpoints

    def find_endpoint(self, operation_id: str) -> Endpoint | None:
        """Return the first endpoint with ``operation_id``, if any."""
        for endpoint in self.list_endpoints():
            if endpoint.operation_id == operation_id:
                return endpoint
        return None

    def _parse_operation(self, path: str, method: str, operation: dict) -> Endpoint:
        responses = get_mapping(operation, "responses")
        return Endpoint(
            source_document_id=self.name,
            path=path,
            operation_id=get_str(operation, "operationId") or f"{method}{path.replace('/', '_')}",
            method=method.upper(),
            summary=get_str(operation, "summary"),
            description=get_str(operation, "description"),
            parameters=_parse_parameters(get_list(operation, "parameters")),
            request_body_example=self._request_body_example(operation),
            success_example_response=self._success_example(responses),
            error_example_response=self._error_example(responses),
        )

    def _request_body_example(self, operation: dict) -> Any:
        content = get_path(operation, "requestBody", "content", JSON_CONTENT_TYPE)
        if content is None:
            return {}
        return self._content_example(content)

    def _success_example(self, responses: dict) -> Any:
        response = responses.get("200", responses.get(200))
        content = get_path(response, "content", JSON_CONTENT_TYPE)
        if content is None:
            return {}
        return self._content_example(content)

    def _error_example(self, responses: dict) -> Any:
        for code, response in responses.items():
            if not _is_error_status(code):
                continue
            content = get_path(response, "content", JSON_CONTENT_TYPE)
            if content is not None:
                return self._content_example(content)
        return copy.deepcopy(DEFAULT_ERROR_EXAMPLE)

    def _content_example(self, content: dict) -> Any:
        if content.get("example") is not None:
            return copy.deepcopy(content["example"])
        schema = content.get("schema")
        if isinstance(schema, dict) and schema.get("example") is not None:
            return copy.deepcopy(schema["example"])
        if schema:
            return self.sampler.synthesize(schema)
        return {}


def _parse_parameters(params: list) -> list[Param]:
    result = []
    for p in params:
        if not isinstance(p, dict):
            continue
        param_type = get_str(get_mapping(p, "schema"), "type") or get_str(p, "type", "string")
        example = p.get("example")
        result.append(
            Param(
                name=get_str(p, "name"),
                location=get_str(p, "in", "query"),
                param_type=param_type,
                description=get_str(p, "description"),
                required=p.get("required") is True,
                example=_stringify(example) if example not in (None, "") else _TYPE_EXAMPLES.get(param_type, ""),
            )
        )
    return result


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, default=str)


def _is_error_status(code: Any) -> bool:
    """True for keys like ``404`` or ``"500"``; ``default`` and ``4XX`` don't count."""
    match = _LEADING_INT.match(str(code))
    return match is not None and int(match.group()) // 100 >= 4
