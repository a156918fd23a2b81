"""
Events reported by the simple renderer and the parser for its output.

The renderer answers a script with a single line such as ``selected: ok``,
``input:name : text`` or ``range:slider : 7``.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Annotated, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

SELECTED_PREFIX = "selected:"
INPUT_PREFIX = "input:"
RANGE_PREFIX = "range:"

# The renderer puts one space between the prefix and the payload
PREFIX_SPACE = " "

VALUE_SEPARATOR = " : "


class BaseSimpleEvent(BaseModel):
    """Base for all renderer events."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str


class SelectionEvent(BaseSimpleEvent):
    """A button or selectable widget was activated."""

    type: Literal["selection"] = "selection"


class InputEvent(BaseSimpleEvent):
    """Text content of an input widget changed."""

    type: Literal["input"] = "input"
    value: str


class RangeEvent(BaseSimpleEvent):
    """Slider value changed. ``value`` is NaN when the payload is not numeric."""

    type: Literal["range"] = "range"
    value: float


SimpleEvent = Annotated[
    Union[SelectionEvent, InputEvent, RangeEvent],
    Field(discriminator="type"),
]


def _payload(output: str, prefix: str) -> str:
    payload = output[len(prefix):]
    if payload.startswith(PREFIX_SPACE):
        payload = payload[len(PREFIX_SPACE):]
    return payload


def _split_payload(payload: str) -> Optional[Tuple[str, str]]:
    parts = payload.split(VALUE_SEPARATOR)
    if len(parts) < 2:
        return None
    return parts[0], parts[1]


# JavaScript Number() string grammar: no underscores, no
# inf/nan spellings, radix prefixes without sign
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_RADIX_RES = {
    16: re.compile(r"0[xX]([0-9a-fA-F]+)"),
    8: re.compile(r"0[oO]([0-7]+)"),
    2: re.compile(r"0[bB]([01]+)"),
}
_INFINITIES = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}


def _to_number(text: str) -> float:
    if not text:
        return 0.0
    if _DECIMAL_RE.fullmatch(text):
        return float(text)
    if text in _INFINITIES:
        return _INFINITIES[text]
    for base, pattern in _RADIX_RES.items():
        match = pattern.fullmatch(text)
        if match:
            try:
                return float(int(match.group(1), base))
            except OverflowError:
                return math.inf
    return math.nan


def parse_simple_output(output: str) -> Optional[BaseSimpleEvent]:
    """
    Parse one line of renderer output.

    Args:
        output: Output line, trailing newline allowed

    Returns:
        The event, or None for output that is not recognized. Unrecognized
        output is logged as a warning and never raises.
    """
    if output.startswith(SELECTED_PREFIX):
        return SelectionEvent(id=_payload(output, SELECTED_PREFIX).strip())

    if output.startswith(INPUT_PREFIX):
        parts = _split_payload(_payload(output, INPUT_PREFIX))
        if parts is not None:
            widget_id, value = parts
            return InputEvent(id=widget_id, value=value.strip())

    elif output.startswith(RANGE_PREFIX):
        parts = _split_payload(_payload(output, RANGE_PREFIX))
        if parts is not None:
            widget_id, value = parts
            return RangeEvent(id=widget_id, value=_to_number(value.strip()))

    logger.warning(f"unknown simple output '{output}'", extra={"output": output})
    return None


__all__ = [
    "BaseSimpleEvent",
    "SelectionEvent",
    "InputEvent",
    "RangeEvent",
    "SimpleEvent",
    "parse_simple_output",
]
