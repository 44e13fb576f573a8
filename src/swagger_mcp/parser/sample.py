"""Example synthesis from JSON schema fragments.

Walks a schema node and builds one representative value for it,
resolving ``#/components/schemas/...`` references against the owning
document and following ``oneOf`` / ``anyOf`` / ``allOf``. Synthesis
never fails: anything unrecognized becomes an empty object.
"""

import copy
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable

from .access import as_mapping, get_list, get_mapping

logger = logging.getLogger(__name__)

REF_PREFIX = "#/components/schemas/"

NIL_UUID = "00000000-0000-0000-0000-000000000000"
EXAMPLE_EMAIL = "user@example.com"

Clock = Callable[[], datetime]


class SchemaKind(str, Enum):
    """The shape a schema node is synthesized as, in precedence order."""

    REF = "ref"
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    NULL = "null"
    ONE_OF = "oneOf"
    ANY_OF = "anyOf"
    ALL_OF = "allOf"
    UNKNOWN = "unknown"


_TYPED_KINDS = {
    "object": SchemaKind.OBJECT,
    "array": SchemaKind.ARRAY,
    "string": SchemaKind.STRING,
    "number": SchemaKind.NUMBER,
    "integer": SchemaKind.INTEGER,
    "boolean": SchemaKind.BOOLEAN,
    "null": SchemaKind.NULL,
}


def classify(node: Any) -> SchemaKind:
    """Return the kind of ``node``; the first matching rule wins."""
    node = as_mapping(node)
    # a non-string $ref is ignored and the node is classified by its other keys
    if isinstance(node.get("$ref"), str):
        return SchemaKind.REF

    schema_type = node.get("type")
    if isinstance(schema_type, str) and schema_type in _TYPED_KINDS:
        return _TYPED_KINDS[schema_type]

    if get_list(node, "oneOf"):
        return SchemaKind.ONE_OF
    if get_list(node, "anyOf"):
        return SchemaKind.ANY_OF
    if get_list(node, "allOf"):
        return SchemaKind.ALL_OF
    return SchemaKind.UNKNOWN


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """Render ``moment`` as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` in UTC."""
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


class SampleSynthesizer:
    """Builds example values for schema nodes of one document."""

    def __init__(self, document: Any = None, clock: Clock | None = None):
        self.schemas = get_mapping(get_mapping(document, "components"), "schemas")
        self.clock = clock or utc_now

    def synthesize(self, node: Any) -> Any:
        """Return one representative value for ``node``."""
        return self._sample(node, ())

    def _sample(self, node: Any, resolving: tuple[str, ...]) -> Any:
        kind = classify(node)
        node = as_mapping(node)

        if kind is SchemaKind.REF:
            return self._sample_ref(node["$ref"], resolving)
        if kind is SchemaKind.OBJECT:
            properties = get_mapping(node, "properties")
            return {name: self._sample(prop, resolving) for name, prop in properties.items()}
        if kind is SchemaKind.ARRAY:
            if node.get("items") is None:
                return []
            return [self._sample(node["items"], resolving)]
        if kind is SchemaKind.STRING:
            return self._sample_string(node)
        if kind in (SchemaKind.NUMBER, SchemaKind.INTEGER):
            return 0
        if kind is SchemaKind.BOOLEAN:
            return False
        if kind is SchemaKind.NULL:
            return None
        if kind is SchemaKind.ONE_OF:
            return self._sample(node["oneOf"][0], resolving)
        if kind is SchemaKind.ANY_OF:
            return self._sample(node["anyOf"][0], resolving)
        if kind is SchemaKind.ALL_OF:
            merged: dict = {}
            for branch in node["allOf"]:
                value = self._sample(branch, resolving)
                if isinstance(value, dict):
                    merged.update(value)
            return merged
        return {}

    def _sample_ref(self, ref: str, resolving: tuple[str, ...]) -> Any:
        name = ref[len(REF_PREFIX):]
        if not ref.startswith(REF_PREFIX) or name not in self.schemas:
            logger.debug("Unresolved reference %s", ref)
            return {}
        if name in resolving:
            logger.debug("Reference cycle through %s, using empty object", ref)
            return {}
        return self._sample(self.schemas[name], resolving + (name,))

    def _sample_string(self, node: dict) -> Any:
        enum = get_list(node, "enum")
        if enum:
            return copy.deepcopy(enum[0])

        fmt = node.get("format")
        if fmt == "date-time":
            return format_timestamp(self.clock())
        if fmt == "date":
            return format_timestamp(self.clock()).split("T")[0]
        if fmt == "email":
            return EXAMPLE_EMAIL
        if fmt == "uuid":
            return NIL_UUID
        return "string"


def synthesize(node: Any, document: Any = None, clock: Clock | None = None) -> Any:
    """Shortcut for ``SampleSynthesizer(document, clock).synthesize(node)``."""
    return SampleSynthesizer(document, clock).synthesize(node)
