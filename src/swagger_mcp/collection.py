"""Registry of the API description documents served by this process."""

from dataclasses import dataclass
from typing import Any

from swagger_mcp.parser.access import get_mapping
from swagger_mcp.parser.sample import Clock
from swagger_mcp.parser.swagger import SwaggerParser


@dataclass(frozen=True)
class SwaggerSource:
    """A fetched document and where it came from."""

    name: str
    url: str
    schema: Any


@dataclass(frozen=True)
class SwaggerInfo:
    id: str
    url: str
    title: str | None
    parser: SwaggerParser


class SwaggerCollection:
    """Fixed, ordered set of named documents.

    Duplicate names are kept; lookups return the first match.
    """

    def __init__(self, sources: list[SwaggerSource], clock: Clock | None = None):
        self.sources = tuple(sources)
        self.clock = clock

    def list_swaggers(self) -> list[SwaggerInfo]:
        return [self._to_info(source) for source in self.sources]

    def get_swagger(self, swagger_id: str) -> SwaggerInfo | None:
        for source in self.sources:
            if source.name == swagger_id:
                return self._to_info(source)
        return None

    def _to_info(self, source: SwaggerSource) -> SwaggerInfo:
        title = get_mapping(source.schema, "info").get("title")
        return SwaggerInfo(
            id=source.name,
            url=source.url,
            title=title if isinstance(title, str) else None,
            parser=SwaggerParser(source.name, source.schema, clock=self.clock),
        )
