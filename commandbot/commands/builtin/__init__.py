"""Commands registered by ``CommandRegistry.register_default_commands``."""

from .help import HelpCommand
from .ping import PingCommand
from .unknown import UnknownCommand

__all__ = ["HelpCommand", "PingCommand", "UnknownCommand"]
