from __future__ import annotations

from typing import Any

from src.core.connection.url_builder import ConnectionUrlBuilder

MESSY_APP_ID = "My App File Name With_Some%Annoying Stuff!InItsName?"
ENCODED_APP_ID = "My%20App%20File%20Name%20With_Some%25Annoying%20Stuff!InItsName%3F"

IPV6_HOST = "[2001:0db8:0a0b:12f0:0000:0000:0000:0001]"
IPV6_HOST_CANONICAL = "[2001:db8:a0b:12f0::1]"


def build_connection_spec_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "secure": True,
        "host": "engine.example.com",
        "port": 4848,
        "prefix": "/sense/",
        "app_id": "Sales Dashboard",
        "identity": "session 1",
        "ttl": 30,
        "params": [["reloadUri", "https://example.com/back"]],
    }
    payload.update(overrides)
    return payload


def build_full_builder() -> ConnectionUrlBuilder:
    return (
        ConnectionUrlBuilder()
        .with_hostname("engine")
        .with_port(4848)
        .with_prefix("proxy")
        .with_subpath("dataprepservice")
        .with_route("/hub/")
        .with_identity("id 1")
        .with_ttl(30)
        .with_params([("a", "1"), ("b c", "d&e"), ("a", "2")])
    )
