"""
Command model and line serializer for the simple renderer.

Every command maps to exactly one protocol line. Widgets start with a
``<type>[:<id>]`` header followed by their rectangle; directives start with
``@``. A script is the commands joined by newlines, in order.

All models use Pydantic v2, are immutable and reject unknown fields.
"""

from __future__ import annotations

import math
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Iterable, List, Literal, Optional, Sequence, Union

import orjson
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .diacritics import repair_diacritics

Number = Union[int, float]


class WidgetType(str, Enum):
    """Widget tags understood by the renderer."""

    LABEL = "label"
    PARAGRAPH = "paragraph"
    BUTTON = "button"
    TEXTINPUT = "textinput"
    TEXTAREA = "textarea"
    IMAGE = "image"
    RANGE = "range"
    CANVAS = "canvas"


class JustifyType(str, Enum):
    """Text alignment for the ``@justify`` directive."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


WIDGET_TYPES = tuple(widget.value for widget in WidgetType)
DIRECTIVE_TYPES = ("justify", "fontsize", "timeout", "noclear")

# Widgets whose line is wrapped in [ ] by the renderer grammar
BLOCK_WIDGET_TYPES = frozenset({WidgetType.PARAGRAPH.value, WidgetType.TEXTAREA.value})


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(str(d) for d in digit_tuple).rstrip("0")
    exponent += len(digit_tuple) - len(digits)
    # Position of the decimal point relative to the first digit
    point = len(digits) + exponent

    if len(digits) <= point <= 21:
        return sign + digits + "0" * (point - len(digits))
    if 0 < point <= 21:
        return sign + digits[:point] + "." + digits[point:]
    if -6 < point <= 0:
        return sign + "0." + "0" * -point + digits

    power = point - 1
    mantissa = digits if len(digits) == 1 else digits[0] + "." + digits[1:]
    return f"{sign}{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"


def format_number(value: Number) -> str:
    """
    Render a number the way JavaScript's ``String(number)`` does.

    ``10.0`` becomes ``10``, ``1e21`` becomes ``1e+21`` and ``1e-7`` becomes
    ``1e-7``. Python ints are written out in full.
    """
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, float):
        return _format_float(value)
    return str(value)


class Rect(BaseModel):
    """Axis-aligned rectangle in device pixels. Bounds are not checked."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    x: Number
    y: Number
    width: Number
    height: Number

    def to_tokens(self) -> List[str]:
        return [format_number(v) for v in (self.x, self.y, self.width, self.height)]


class BaseCommand(BaseModel):
    """Base for all commands."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    def to_line(self) -> str:
        raise NotImplementedError


class WidgetCommand(BaseCommand):
    """Widget placed on the canvas; anonymous when ``id`` is empty."""

    id: Optional[str] = None
    rect: Rect

    @property
    def header(self) -> str:
        kind = getattr(self, "type")
        return f"{kind}:{self.id}" if self.id else kind

    def trailing_tokens(self) -> List[str]:
        return []

    def to_line(self) -> str:
        return " ".join([self.header, *self.rect.to_tokens(), *self.trailing_tokens()])


class TextWidgetCommand(WidgetCommand):
    """Widget carrying free text as its last field."""

    value: str = ""

    def to_line(self) -> str:
        line = " ".join([self.header, *self.rect.to_tokens()])
        if self.value:
            # Last field, so spaces in the text need no escaping
            line += " " + repair_diacritics(self.value)
        if getattr(self, "type") in BLOCK_WIDGET_TYPES:
            line = f"[{line}]"
        return line


class LabelCommand(TextWidgetCommand):
    """Single-line static text."""

    type: Literal["label"] = "label"


class ParagraphCommand(TextWidgetCommand):
    """Multi-line static text."""

    type: Literal["paragraph"] = "paragraph"


class ButtonCommand(TextWidgetCommand):
    """Clickable text; produces a selection event."""

    type: Literal["button"] = "button"


class TextInputCommand(TextWidgetCommand):
    """Single-line editable field."""

    type: Literal["textinput"] = "textinput"


class TextAreaCommand(TextWidgetCommand):
    """Multi-line editable field."""

    type: Literal["textarea"] = "textarea"


class RangeCommand(WidgetCommand):
    """Numeric slider."""

    type: Literal["range"] = "range"
    min: Number
    max: Number
    value: Number

    def trailing_tokens(self) -> List[str]:
        return [format_number(self.min), format_number(self.max), format_number(self.value)]


class ImageCommand(WidgetCommand):
    """Bitmap loaded from ``path`` on the device."""

    type: Literal["image"] = "image"
    path: str

    def trailing_tokens(self) -> List[str]:
        return [self.path]


class CanvasCommand(WidgetCommand):
    """Drawable surface backed by raw stroke data and a rendered PNG."""

    type: Literal["canvas"] = "canvas"
    raw_path: str = Field(alias="rawPath")
    png_path: str = Field(alias="pngPath")

    def trailing_tokens(self) -> List[str]:
        return [self.raw_path, self.png_path]


class JustifyCommand(BaseCommand):
    type: Literal["justify"] = "justify"
    justify: JustifyType

    def to_line(self) -> str:
        return f"@justify {self.justify.value}"


class FontSizeCommand(BaseCommand):
    type: Literal["fontsize"] = "fontsize"
    font_size: Number = Field(alias="fontSize")

    def to_line(self) -> str:
        return f"@fontsize {format_number(self.font_size)}"


class TimeoutCommand(BaseCommand):
    type: Literal["timeout"] = "timeout"
    timeout: Number

    def to_line(self) -> str:
        return f"@timeout {format_number(self.timeout)}"


class NoClearCommand(BaseCommand):
    type: Literal["noclear"] = "noclear"

    def to_line(self) -> str:
        return "@noclear"


SimpleCommand = Annotated[
    Union[
        LabelCommand,
        ParagraphCommand,
        ButtonCommand,
        TextInputCommand,
        TextAreaCommand,
        RangeCommand,
        ImageCommand,
        CanvasCommand,
        JustifyCommand,
        FontSizeCommand,
        TimeoutCommand,
        NoClearCommand,
    ],
    Field(discriminator="type"),
]

_command_adapter: TypeAdapter[SimpleCommand] = TypeAdapter(SimpleCommand)
_script_adapter: TypeAdapter[List[SimpleCommand]] = TypeAdapter(List[SimpleCommand])


def stringify_simple_command(command: BaseCommand) -> str:
    """Serialize one command to its protocol line."""
    return command.to_line()


def serialize_script(commands: Iterable[BaseCommand]) -> str:
    """Serialize a batch of commands, one line each, order preserved."""
    return "\n".join(stringify_simple_command(command) for command in commands)


def parse_command(data: Any) -> BaseCommand:
    """
    Build a command from a plain mapping such as ``{"type": "label", ...}``.

    Raises:
        pydantic.ValidationError: If the mapping is not a valid command
    """
    return _command_adapter.validate_python(data)


def load_script(data: Union[str, bytes, Sequence[Any]]) -> List[BaseCommand]:
    """
    Load a batch of commands from a JSON document or a list of mappings.

    Raises:
        orjson.JSONDecodeError: If ``data`` is not valid JSON
        pydantic.ValidationError: If an entry is not a valid command
    """
    if isinstance(data, (str, bytes)):
        data = orjson.loads(data)
    return _script_adapter.validate_python(data)


__all__ = [
    "WidgetType",
    "JustifyType",
    "WIDGET_TYPES",
    "DIRECTIVE_TYPES",
    "Rect",
    "BaseCommand",
    "WidgetCommand",
    "TextWidgetCommand",
    "LabelCommand",
    "ParagraphCommand",
    "ButtonCommand",
    "TextInputCommand",
    "TextAreaCommand",
    "RangeCommand",
    "ImageCommand",
    "CanvasCommand",
    "JustifyCommand",
    "FontSizeCommand",
    "TimeoutCommand",
    "NoClearCommand",
    "SimpleCommand",
    "format_number",
    "stringify_simple_command",
    "serialize_script",
    "parse_command",
    "load_script",
]
