"""Helpers to work with (de)serializing of json."""

from __future__ import annotations

from typing import Any

import orjson

JSON_DECODE_EXCEPTIONS = (orjson.JSONDecodeError,)


def json_dumps(data: Any) -> str:
    """Dump json string."""
    return orjson.dumps(data, option=orjson.OPT_NON_STR_KEYS).decode("utf-8")


def json_loads(data: str | bytes) -> Any:
    """Parse json data, raises orjson.JSONDecodeError on invalid input."""
    return orjson.loads(data)
