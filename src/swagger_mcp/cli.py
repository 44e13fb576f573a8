"""CLI entry point for swagger-mcp."""

import logging
import sys
from pathlib import Path

import click

from swagger_mcp.collection import SwaggerCollection
from swagger_mcp.config import DEFAULT_TIMEOUT, ConfigError, load_config
from swagger_mcp.server import serve
from swagger_mcp.tools import SwaggerTools

logger = logging.getLogger(__name__)

config_argument = click.argument("config_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))


def _build_tools(ctx: click.Context, config_path: Path) -> SwaggerTools:
    """Load every configured document; exit with status 1 on any failure."""
    try:
        sources = load_config(config_path, timeout=ctx.obj["timeout"])
    except ConfigError as e:
        click.echo(str(e), err=True)
        ctx.exit(1)
    logger.info("Loaded %d documents from config", len(sources))
    return SwaggerTools(SwaggerCollection(sources))


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.option("--timeout", default=DEFAULT_TIMEOUT, show_default=True, type=float, help="Timeout in seconds for fetching documents.")
@click.pass_context
def main(ctx: click.Context, verbose: bool, timeout: float):
    """Swagger MCP — expose OpenAPI/Swagger documents to LLM agents."""
    # stdout is reserved for the MCP protocol
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    ctx.ensure_object(dict)
    ctx.obj["timeout"] = timeout


@main.command("serve")
@config_argument
@click.pass_context
def serve_cmd(ctx: click.Context, config_path: Path):
    """Run the MCP server on stdio."""
    click.echo(f"Loading configuration from: {config_path}", err=True)
    tools = _build_tools(ctx, config_path)
    serve(tools)


@main.command("list-swaggers")
@config_argument
@click.pass_context
def list_swaggers_cmd(ctx: click.Context, config_path: Path):
    """Print the configured documents."""
    tools = _build_tools(ctx, config_path)
    click.echo(tools.list_swaggers(), nl=False)


@main.command("list-endpoints")
@config_argument
@click.option("--swagger", default=None, help="Only list endpoints of this swagger id.")
@click.pass_context
def list_endpoints_cmd(ctx: click.Context, config_path: Path, swagger: str | None):
    """Print endpoint ids with method, path and description."""
    tools = _build_tools(ctx, config_path)
    click.echo(tools.list_endpoints(swagger), nl=False)


@main.command("get-endpoints")
@config_argument
@click.argument("endpoint_ids", nargs=-1, required=True)
@click.pass_context
def get_endpoints_cmd(ctx: click.Context, config_path: Path, endpoint_ids: tuple[str, ...]):
    """Print details and examples for ENDPOINT_IDS."""
    tools = _build_tools(ctx, config_path)
    click.echo(tools.get_endpoints(list(endpoint_ids)))
