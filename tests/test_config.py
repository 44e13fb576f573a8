import logging
from pathlib import Path

import httpx
import pytest

from swagger_mcp.config import Config, ConfigError, load_config, read_config

FIXTURES = Path(__file__).parent / "fixtures"

DOCUMENTS = {
    "/petstore.json": (FIXTURES / "petstore.json").read_text(encoding="utf-8"),
    "/legacy.yaml": (FIXTURES / "legacy.yaml").read_text(encoding="utf-8"),
}


def _client(documents=DOCUMENTS):
    def handler(request: httpx.Request) -> httpx.Response:
        body = documents.get(request.url.path)
        if body is None:
            return httpx.Response(404, text="not found")
        return httpx.Response(200, text=body)

    return httpx.Client(transport=httpx.MockTransport(handler))


class TestReadConfig:
    def test_reads_json(self):
        config = read_config(FIXTURES / "config.json")
        assert isinstance(config, Config)
        assert [e.name for e in config.endpoints] == ["petstore", "legacy-api"]

    def test_reads_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("endpoints:\n  - name: pets\n    url: https://example.com/pets.json\n", encoding="utf-8")
        assert read_config(path).endpoints[0].url == "https://example.com/pets.json"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Error loading config"):
            read_config(tmp_path / "nope.json")

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{endpoints: [", encoding="utf-8")
        with pytest.raises(ConfigError):
            read_config(path)

    def test_non_utf8_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_bytes(b'{"endpoints": [{"name": "\xff\xfe"}]}')
        with pytest.raises(ConfigError, match="Error loading config"):
            read_config(path)

    @pytest.mark.parametrize(
        "text",
        [
            "[]",
            '{"endpoints": [{"name": "pets"}]}',
            '{"endpoints": [{"name": "pets", "url": "not a url"}]}',
        ],
    )
    def test_invalid_shape(self, tmp_path, text):
        path = tmp_path / "config.json"
        path.write_text(text, encoding="utf-8")
        with pytest.raises(ConfigError):
            read_config(path)


class TestLoadConfig:
    def test_fetches_every_document_in_order(self):
        sources = load_config(FIXTURES / "config.json", client=_client())
        assert [(s.name, s.url) for s in sources] == [
            ("petstore", "https://example.com/petstore.json"),
            ("legacy-api", "https://example.com/legacy.yaml"),
        ]
        assert sources[0].schema["info"]["title"] == "Swagger Petstore"
        assert sources[1].schema["swagger"] == "2.0"

    def test_failed_fetch_is_fatal(self):
        documents = {"/petstore.json": DOCUMENTS["/petstore.json"]}
        with pytest.raises(ConfigError, match="legacy-api"):
            load_config(FIXTURES / "config.json", client=_client(documents))

    def test_undecodable_document_is_fatal(self):
        documents = dict(DOCUMENTS, **{"/legacy.yaml": "key: [unclosed"})
        with pytest.raises(ConfigError):
            load_config(FIXTURES / "config.json", client=_client(documents))

    def test_connection_error_is_fatal(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = httpx.Client(transport=httpx.MockTransport(handler))
        with pytest.raises(ConfigError, match="connection refused"):
            load_config(FIXTURES / "config.json", client=client)

    def test_warns_on_unknown_document(self, caplog):
        documents = dict(DOCUMENTS, **{"/legacy.yaml": '{"hello": "world"}'})
        with caplog.at_level(logging.WARNING, logger="swagger_mcp.config"):
            sources = load_config(FIXTURES / "config.json", client=_client(documents))
        assert sources[1].schema == {"hello": "world"}
        assert "does not look like an OpenAPI or Swagger document" in caplog.text
