from .events import DIRECTIONS, Command, InputEvent, KeyPress, MouseState
from .mapping import InputMapper
from .sources import InputSource, ScriptedInput, StdinInput, parse_event, parse_script

__all__ = [
    "Command",
    "DIRECTIONS",
    "InputEvent",
    "InputMapper",
    "InputSource",
    "KeyPress",
    "MouseState",
    "ScriptedInput",
    "StdinInput",
    "parse_event",
    "parse_script",
]
