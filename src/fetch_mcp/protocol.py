"""JSON-RPC envelopes and error codes used by the MCP server."""

from __future__ import annotations

import json
import math
from enum import IntEnum
from typing import Any, Dict, Mapping, Union

JSONRPC_VERSION = "2.0"
PROTOCOL_VERSION = "2024-11-05"

RequestId = Union[int, str, None]


class ErrorCode(IntEnum):
    """Reserved JSON-RPC error codes."""

    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


class JsonRpcError(Exception):
    """Protocol-level failure that is reported through the ``error`` field."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        """Create an error carrying a JSON-RPC code and message."""
        super().__init__(message)
        self.code = code
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        """Return the ``error`` member of a response."""
        return {"code": int(self.code), "message": self.message}


def success_response(request_id: RequestId, result: Any) -> Dict[str, Any]:
    """Build a success response echoing ``request_id`` unchanged."""
    return {"jsonrpc": JSONRPC_VERSION, "id": request_id, "result": result}


def error_response(request_id: RequestId, error: JsonRpcError) -> Dict[str, Any]:
    """Build an error response echoing ``request_id`` unchanged."""
    return {"jsonrpc": JSONRPC_VERSION, "id": request_id, "error": error.to_dict()}


def _reject_constant(token: str) -> Any:
    raise ValueError(f"Non-finite number {token} is not valid JSON")


def _finite_float(token: str) -> float:
    value = float(token)
    if not math.isfinite(value):
        raise ValueError(f"Number {token} is out of range")
    return value


def decode_message(line: str) -> Any:
    """Parse one line of strict JSON.

    ``NaN``, ``Infinity`` and numbers overflowing a float are rejected so
    they can never be echoed back as invalid JSON.

    Raises:
        ValueError: If the line is not valid JSON.
        RecursionError: If the value is nested too deeply to decode.

    """
    return json.loads(
        line, parse_constant=_reject_constant, parse_float=_finite_float
    )


def encode_message(message: Mapping[str, Any]) -> str:
    """Serialize a message to one compact line of JSON.

    Newlines inside string values are escaped by the encoder, so the output
    never spans more than one line.

    Raises:
        ValueError: If the message holds a non-finite float.

    """
    return json.dumps(message, separators=(",", ":"), allow_nan=False)
