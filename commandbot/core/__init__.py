from .bot import CommandBot
from .dispatcher import Dispatcher, MessageContext
from .event_system import EventSystem
from .registry import CommandName, CommandReference, CommandRegistry, ResolvedCommand

__all__ = [
    "CommandBot",
    "Dispatcher",
    "MessageContext",
    "EventSystem",
    "CommandRegistry",
    "CommandReference",
    "CommandName",
    "ResolvedCommand",
]
