"""End-to-end: config file -> mocked fetch -> collection -> tool output."""

from datetime import datetime, timezone
from pathlib import Path

import httpx

from swagger_mcp.collection import SwaggerCollection
from swagger_mcp.config import load_config
from swagger_mcp.tools import SwaggerTools

FIXTURES = Path(__file__).parent / "fixtures"

EVENTS_DOC = """
openapi: 3.1.0
info:
  title: Events
paths:
  /events:
    post:
      operationId: createEvent
      requestBody:
        content:
          application/json:
            schema:
              $ref: '#/components/schemas/Event'
      responses:
        '200':
          content:
            application/json:
              schema:
                $ref: '#/components/schemas/Event'
components:
  schemas:
    Event:
      type: object
      properties:
        id:
          type: string
          format: uuid
        startsAt:
          type: string
          format: date-time
        day:
          type: string
          format: date
        organizer:
          type: string
          format: email
        parent:
          $ref: '#/components/schemas/Event'
"""


def _transport(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/events.yaml":
        return httpx.Response(200, text=EVENTS_DOC)
    return httpx.Response(404)


def test_full_flow(tmp_path):
    config = tmp_path / "config.json"
    config.write_text(
        '{"endpoints": [{"name": "events-v1", "url": "https://api.example.com/events.yaml"}]}',
        encoding="utf-8",
    )
    client = httpx.Client(transport=httpx.MockTransport(_transport))
    sources = load_config(config, client=client)

    fixed = datetime(2030, 2, 3, 4, 5, 6, tzinfo=timezone.utc)
    tools = SwaggerTools(SwaggerCollection(sources, clock=lambda: fixed))

    assert tools.list_swaggers().splitlines()[1] == "events-v1 | Events | https://api.example.com/events.yaml"
    assert tools.list_endpoints().splitlines()[1] == "events-v1-createEvent | POST /events | "

    details = tools.get_endpoints(["events-v1-createEvent"])
    assert details.startswith("## createEvent \n### URL: POST /events\n")
    assert '"id": "00000000-0000-0000-0000-000000000000"' in details
    assert '"startsAt": "2030-02-03T04:05:06.000Z"' in details
    assert '"day": "2030-02-03"' in details
    assert '"organizer": "user@example.com"' in details
    assert '"parent": {}' in details
    assert '"message": "Bad Request"' in details
