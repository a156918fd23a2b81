"""
Protocol layer for the reMarkable ``simple`` renderer.

Builds widget and directive commands, serializes them to the renderer's
line format, runs scripts through the renderer process and parses the
interaction it reports back.
"""

from .commands import (
    ButtonCommand,
    CanvasCommand,
    FontSizeCommand,
    ImageCommand,
    JustifyCommand,
    JustifyType,
    LabelCommand,
    NoClearCommand,
    ParagraphCommand,
    RangeCommand,
    Rect,
    SimpleCommand,
    TextAreaCommand,
    TextInputCommand,
    TimeoutCommand,
    WidgetType,
    load_script,
    parse_command,
    serialize_script,
    stringify_simple_command,
)
from .config import DEFAULT_SIMPLE_PATH, SimpleConfig
from .diacritics import PROBLEM_LETTERS, repair_diacritics
from .errors import SimpleError, SimpleExecutionError, SimpleTimeoutError
from .events import (
    InputEvent,
    RangeEvent,
    SelectionEvent,
    SimpleEvent,
    parse_simple_output,
)
from .executor import ScriptHandle, SimpleExecutor, execute_simple_script
from .layout import (
    FONT_SIZE_TO_CHARACTER_HEIGHT,
    FONT_SIZE_TO_CHARACTER_WIDTH,
    REMARKABLE_SCREEN_SIZE,
    ScreenSize,
    TextSize,
    calculate_text_widget_size,
    fits_on_screen,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ButtonCommand",
    "CanvasCommand",
    "FontSizeCommand",
    "ImageCommand",
    "JustifyCommand",
    "JustifyType",
    "LabelCommand",
    "NoClearCommand",
    "ParagraphCommand",
    "RangeCommand",
    "Rect",
    "SimpleCommand",
    "TextAreaCommand",
    "TextInputCommand",
    "TimeoutCommand",
    "WidgetType",
    "load_script",
    "parse_command",
    "serialize_script",
    "stringify_simple_command",
    "DEFAULT_SIMPLE_PATH",
    "SimpleConfig",
    "PROBLEM_LETTERS",
    "repair_diacritics",
    "SimpleError",
    "SimpleExecutionError",
    "SimpleTimeoutError",
    "InputEvent",
    "RangeEvent",
    "SelectionEvent",
    "SimpleEvent",
    "parse_simple_output",
    "ScriptHandle",
    "SimpleExecutor",
    "execute_simple_script",
    "FONT_SIZE_TO_CHARACTER_HEIGHT",
    "FONT_SIZE_TO_CHARACTER_WIDTH",
    "REMARKABLE_SCREEN_SIZE",
    "ScreenSize",
    "TextSize",
    "calculate_text_widget_size",
    "fits_on_screen",
]
