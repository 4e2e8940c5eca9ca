"""Helm command classification for helmsafe."""

from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, List, Mapping, Sequence

from ..utils.logging import logger


def _freeze(table: Mapping[str, Sequence[str]]) -> Mapping[str, FrozenSet[str]]:
    return MappingProxyType({name: frozenset(subs) for name, subs in table.items()})


# An empty subcommand set gates the whole command.
SAFE_COMMANDS = _freeze({
    "list": [], "ls": [], "status": [], "get": [], "history": [],
    "show": ["values", "chart", "readme", "all"],
    "test": [],
    "lint": [],
    "verify": [],
    "version": [],
    "help": [],
    "search": ["hub", "repo"],
    "pull": [],
    "template": [],
    "dependency": ["list"],
    "plugin": ["list"],
    "repo": ["list", "index"],
    "completion": ["bash", "zsh", "fish", "powershell"],
    "env": [],
})

MODIFYING_COMMANDS = _freeze({
    "install": [], "upgrade": [], "uninstall": [], "delete": [], "rollback": [],
    "create": [],
    "dependency": ["update", "build"],
    "package": [],
    "plugin": ["install", "update", "uninstall"],
    "repo": ["add", "update", "remove"],
    "push": [],
})


class CommandClass(Enum):
    """Outcome of classifying a helm command."""
    SAFE = "safe"
    MODIFYING = "modifying"
    UNCLASSIFIED = "unclassified"

    @property
    def requires_checks(self) -> bool:
        return self is CommandClass.MODIFYING


def matches_table(table: Mapping[str, FrozenSet[str]], command: str, args: Sequence[str]) -> bool:
    """Check whether a command (and its first argument) is gated by a table.
    
    Args:
        table: Mapping of command name to gated subcommands
        command: Top-level helm command
        args: Arguments following the command
        
    Returns:
        True if the table lists the whole command, or lists args[0] as a subcommand
    """
    subcommands = table.get(command)
    if subcommands is None:
        return False
    if not subcommands:
        return True
    return len(args) > 0 and args[0] in subcommands


class CommandClassifier:
    """Decides whether a helm command passes straight through or needs safety checks."""
    
    def __init__(self,
                 safe_commands: Mapping[str, FrozenSet[str]] = SAFE_COMMANDS,
                 modifying_commands: Mapping[str, FrozenSet[str]] = MODIFYING_COMMANDS):
        self.safe_commands = safe_commands
        self.modifying_commands = modifying_commands
    
    def classify(self, command: str, args: Sequence[str]) -> CommandClass:
        """Classify a helm command.
        
        The safe table is consulted first, so a command listed in both
        tables is treated as safe.
        
        Args:
            command: Top-level helm command (e.g. "install")
            args: Remaining arguments after the command
            
        Returns:
            CommandClass for the invocation
        """
        if matches_table(self.safe_commands, command, args):
            result = CommandClass.SAFE
        elif matches_table(self.modifying_commands, command, args):
            result = CommandClass.MODIFYING
        else:
            result = CommandClass.UNCLASSIFIED
        
        logger.debug(f"Classified '{command}' {list(args[:1])} as {result.value}")
        return result
    
    def is_safe(self, command: str, args: Sequence[str]) -> bool:
        return self.classify(command, args) is CommandClass.SAFE
    
    def is_modifying(self, command: str, args: Sequence[str]) -> bool:
        return self.classify(command, args) is CommandClass.MODIFYING
    
    def modifying_command_names(self) -> List[str]:
        """List modifying commands as "command" or "command subcommand", sorted."""
        names = []
        for command, subcommands in self.modifying_commands.items():
            if not subcommands:
                names.append(command)
            else:
                names.extend(f"{command} {sub}" for sub in subcommands)
        return sorted(names)
    
    def safe_command_names(self) -> List[str]:
        """List top-level commands that have at least one safe form, sorted."""
        return sorted(self.safe_commands)


def create_command_classifier() -> CommandClassifier:
    """Create a command classifier with the built-in helm tables."""
    return CommandClassifier()
