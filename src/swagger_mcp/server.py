"""MCP server exposing the swagger tools over stdio."""

import logging
from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from swagger_mcp.tools import SwaggerTools

logger = logging.getLogger(__name__)

SERVER_NAME = "swagger"


def build_server(tools: SwaggerTools) -> FastMCP:
    """Create a FastMCP server with list-swaggers, list-endpoints and get-endpoints."""
    mcp = FastMCP(SERVER_NAME)

    @mcp.tool(name="list-swaggers", description="List all connected swagger endpoints")
    def list_swaggers() -> str:
        return tools.list_swaggers()

    @mcp.tool(
        name="list-endpoints",
        description=(
            "List all available endpoints with a short description. "
            "If swagger is provided, only endpoints from that swagger will be listed."
        ),
    )
    def list_endpoints(
        swagger: Annotated[str | None, Field(description="Swagger id returned by list-swaggers")] = None,
    ) -> str:
        return tools.list_endpoints(swagger)

    @mcp.tool(name="get-endpoints", description="Get detailed information about specific endpoints")
    def get_endpoints(
        endpointIds: Annotated[
            list[str],
            Field(
                description=(
                    "List of endpoint IDs to retrieve details for. "
                    "Endpoint ids can be found in the list-endpoints tool."
                )
            ),
        ],
    ) -> str:
        return tools.get_endpoints(endpointIds)

    return mcp


def serve(tools: SwaggerTools) -> None:
    """Run the server on stdio until the client disconnects."""
    mcp = build_server(tools)
    logger.info("Swagger MCP Server running on stdio")
    mcp.run(transport="stdio")
