from typing import Any

import orjson


def from_bytes(raw: bytes | bytearray | str) -> Any:
    """JSON bytes/str 을 파이썬 객체로 역직렬화 (orjson.JSONDecodeError 전파)"""
    return orjson.loads(raw)
