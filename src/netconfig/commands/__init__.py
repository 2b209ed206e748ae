"""Configuration commands and their dispatch table."""
from .base import Command, CommandContext, COMPLETE_MESSAGE
from .registry import COMMANDS, HELP_TOKENS, execute, find_command, print_help

__all__ = [
    "Command",
    "CommandContext",
    "COMMANDS",
    "COMPLETE_MESSAGE",
    "HELP_TOKENS",
    "execute",
    "find_command",
    "print_help",
]
