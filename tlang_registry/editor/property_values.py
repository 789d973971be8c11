"""Decoding of values typed into the node properties panel.

The panel offers a free-text field per unconnected input. Text that is
valid JSON becomes the decoded value (numbers, arrays, objects); anything
else is kept verbatim as a string.

The registry pipeline does not call this; it is the Python side of the
properties panel contract, for tools that feed values into graphs built
from the generated registry.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class InputValue:
    """An entered input value and whether it was decoded as JSON."""

    value: Any
    structured: bool


def decode_input_value(text: str) -> InputValue:
    """Decode panel input text, falling back to the raw string."""
    ok, decoded = _decode_json(text)
    if ok:
        return InputValue(value=decoded, structured=True)
    return InputValue(value=text, structured=False)


def _decode_json(text: str) -> tuple[bool, Any]:
    try:
        return True, json.loads(text, parse_constant=_reject_constant)
    except ValueError:
        return False, None


def _reject_constant(name: str) -> Any:
    # NaN / Infinity are not JSON
    raise ValueError(f"Not a JSON value: {name}")
