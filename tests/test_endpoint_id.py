import pytest

from swagger_mcp.endpoint_id import InvalidEndpointId, decode_endpoint_id, encode_endpoint_id


class TestEncode:
    def test_joins_with_hyphen(self):
        assert encode_endpoint_id("my-doc", "getThing") == "my-doc-getThing"


class TestDecode:
    def test_splits_at_last_hyphen(self):
        assert decode_endpoint_id("my-doc-getThing") == ("my-doc", "getThing")

    @pytest.mark.parametrize("doc, op", [("petstore", "listPets"), ("a-b-c", "get_a_b"), ("x", "y")])
    def test_roundtrip(self, doc, op):
        assert decode_endpoint_id(encode_endpoint_id(doc, op)) == (doc, op)

    def test_hyphenated_operation_id_does_not_roundtrip(self):
        assert decode_endpoint_id(encode_endpoint_id("doc", "get-thing")) == ("doc-get", "thing")

    @pytest.mark.parametrize("token", ["noHyphenHere", "-getThing", "doc-", "-", ""])
    def test_invalid_format(self, token):
        with pytest.raises(InvalidEndpointId) as exc_info:
            decode_endpoint_id(token)
        assert str(exc_info.value) == f"Invalid endpoint ID format: {token}"
        assert exc_info.value.token == token

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            decode_endpoint_id("noHyphenHere")
