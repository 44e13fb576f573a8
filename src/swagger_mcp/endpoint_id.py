"""Endpoint ids: a document id and an operation id joined by a hyphen.

Document ids may contain hyphens, operation ids may not: decoding
always splits at the last hyphen.
"""

SEPARATOR = "-"


class InvalidEndpointId(ValueError):
    """Raised when a token cannot be split into document and operation ids."""

    def __init__(self, token: str):
        super().__init__(f"Invalid endpoint ID format: {token}")
        self.token = token


def encode_endpoint_id(document_id: str, operation_id: str) -> str:
    return f"{document_id}{SEPARATOR}{operation_id}"


def decode_endpoint_id(token: str) -> tuple[str, str]:
    """Split ``token`` into ``(document_id, operation_id)``."""
    document_id, sep, operation_id = token.rpartition(SEPARATOR)
    if not sep or not document_id or not operation_id:
        raise InvalidEndpointId(token)
    return document_id, operation_id
