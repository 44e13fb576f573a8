"""Text rendering for the swagger tools.

Each public method of SwaggerTools backs one tool and returns the text
handed back to the caller. Lookup failures are reported as lines in
that text, never raised.
"""

import json
from typing import Any
from urllib.parse import quote

from swagger_mcp.collection import SwaggerCollection
from swagger_mcp.endpoint_id import InvalidEndpointId, decode_endpoint_id, encode_endpoint_id
from swagger_mcp.parser.base import Endpoint, Param

SWAGGERS_HEADER = "List of available swaggers (id | name | url):"
ENDPOINTS_HEADER = "List of available endpoints (endpointId | method | path | description):"
DETAILS_SEPARATOR = "\n\n---\n\n"
NO_DETAILS = "No endpoint details found."

_GROUPED_LOCATIONS = ("path", "query", "body")

# Characters left unescaped in a URI component.
_URI_COMPONENT_SAFE = "-_.!~*'()"


class SwaggerTools:
    """Query surface over a SwaggerCollection."""

    def __init__(self, collection: SwaggerCollection):
        self.collection = collection

    def list_swaggers(self) -> str:
        lines = [SWAGGERS_HEADER]
        for swagger in self.collection.list_swaggers():
            lines.append(f"{swagger.id} | {swagger.title or ''} | {swagger.url}")
        return "\n".join(lines) + "\n"

    def list_endpoints(self, swagger: str | None = None) -> str:
        """List endpoints of one document, or of all documents when ``swagger`` is None."""
        if swagger:
            swagger_ids = [swagger]
        else:
            swagger_ids = [s.id for s in self.collection.list_swaggers()]

        lines = [ENDPOINTS_HEADER]
        for swagger_id in swagger_ids:
            info = self.collection.get_swagger(swagger_id)
            if info is None:
                continue
            for endpoint in info.parser.list_endpoints():
                lines.append(" | ".join([
                    encode_endpoint_id(endpoint.source_document_id, endpoint.operation_id),
                    f"{endpoint.method} {endpoint.path}",
                    merge_description(endpoint),
                ]))
        return "\n".join(lines) + "\n"

    def get_endpoints(self, endpoint_ids: list[str]) -> str:
        """Render details for each id; unknown or malformed ids become a diagnostic line."""
        blocks = [self._endpoint_details(endpoint_id) for endpoint_id in endpoint_ids]
        return DETAILS_SEPARATOR.join(blocks) or NO_DETAILS

    def _endpoint_details(self, endpoint_id: str) -> str:
        try:
            swagger_id, operation_id = decode_endpoint_id(endpoint_id)
        except InvalidEndpointId as e:
            return str(e)

        info = self.collection.get_swagger(swagger_id)
        if info is None:
            return f"Swagger not found: {swagger_id} for endpoint {endpoint_id}"

        endpoint = info.parser.find_endpoint(operation_id)
        if endpoint is None:
            return f"Endpoint not found: {operation_id} in swagger {swagger_id}"

        return format_endpoint_details(endpoint)


def merge_description(endpoint: Endpoint) -> str:
    """Summary, period-terminated, followed by the description."""
    summary = endpoint.summary
    if not summary:
        return endpoint.description
    if not summary.endswith("."):
        summary += "."
    return f"{summary} {endpoint.description}".strip()


def format_endpoint_details(endpoint: Endpoint) -> str:
    """Render one endpoint as a markdown block with example HTTP exchanges."""
    path_params = _params_in(endpoint, "path")
    query_params = _params_in(endpoint, "query")
    body_params = _params_in(endpoint, "body")
    other_params = [p for p in endpoint.parameters if p.location not in _GROUPED_LOCATIONS]

    parts = [
        f"## {endpoint.operation_id} {endpoint.summary}\n",
        f"### URL: {endpoint.method} {endpoint.path}\n",
    ]
    if endpoint.description:
        parts.append(f"### Description\n{endpoint.description}\n")

    parts.append(_param_section("Path Parameters", path_params))
    parts.append(_param_section("Query Parameters", query_params))
    parts.append(_param_section("Body Parameters", body_params))
    parts.append(_param_section("Other Parameters", other_params, with_location=True))

    parts.append("### Example Request\n")
    parts.append("```http\n")
    parts.append(_example_request(endpoint, path_params, query_params, body_params, other_params))
    parts.append("\n```\n\n")

    parts.append("### Example Response\n")
    parts.append(_example_response("HTTP/2 200 OK", endpoint.success_example_response))
    parts.append("\n```\n\n")

    parts.append("### Error Response Example\n")
    parts.append(_example_response("HTTP/2 400 Bad Request", endpoint.error_example_response))
    parts.append("\n```")
    return "".join(parts)


def _params_in(endpoint: Endpoint, location: str) -> list[Param]:
    return [p for p in endpoint.parameters if p.location == location]


def _param_section(title: str, params: list[Param], with_location: bool = False) -> str:
    if not params:
        return ""
    lines = [f"### {title}"]
    for p in params:
        details = f"{p.location}, {p.param_type}" if with_location else p.param_type
        if p.required:
            details += ", required"
        lines.append(f"- `{p.name}` ({details}): {p.description}")
    return "\n".join(lines) + "\n\n"


def _example_request(
    endpoint: Endpoint,
    path_params: list[Param],
    query_params: list[Param],
    body_params: list[Param],
    other_params: list[Param],
) -> str:
    url = endpoint.path
    for p in path_params:
        url = url.replace(_placeholder(p), p.example or _placeholder(p), 1)
    if query_params:
        url += "?" + "&".join(
            f"{p.name}={quote(p.example or _placeholder(p), safe=_URI_COMPONENT_SAFE)}"
            for p in query_params
        )

    has_body = bool(body_params) or endpoint.request_body_example not in (None, {})

    request = f"{endpoint.method} {url}\n"
    if has_body:
        request += "Content-Type: application/json\n"
    for p in other_params:
        if p.location == "header":
            request += f"{p.name}: {p.example or 'example-value'}\n"
    if has_body:
        request += "\n" + to_json(endpoint.request_body_example)
    return request


def _placeholder(param: Param) -> str:
    return "{" + param.name + "}"


def _example_response(status_line: str, body: Any) -> str:
    return f"```http\n{status_line}\nContent-Type: application/json\n\n{to_json(body)}"


def to_json(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)

