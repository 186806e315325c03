"""
Base Command Classes.

This module defines the abstract base class for all edit commands and
the CommandResult class for operation results.

Each engine operation (select, move, copy, paste, reset, ...) is a
Command object, enabling:
- One execution path with atomic publication in FontEditor
- Operation logging
- Testing in isolation against a bare EditContext

Design Notes:
    Commands are designed to be:
    1. Immutable after creation
    2. Two-phase: compute and validate every target first, then write
    3. Side-effect free on rejection (return CommandResult.error)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from ..contexts import EditContext


@dataclass(frozen=True)
class CommandResult:
    """
    Result of a command execution.

    Attributes:
        success: True if the command was applied.
        message: Optional human-readable message describing the result.
        data: Optional additional data returned by the command.

    Example:
        >>> result = editor.move(2, 10)
        >>> if not result.success:
        ...     print(f"Drag rejected: {result.message}")
    """

    success: bool
    message: str = ""
    data: Any | None = None

    @classmethod
    def ok(cls, message: str = "", data: Any = None) -> CommandResult:
        """
        Create a successful result.

        Args:
            message: Optional success message.
            data: Optional result data.

        Returns:
            CommandResult with success=True.
        """
        return cls(success=True, message=message, data=data)

    @classmethod
    def error(cls, message: str, data: Any = None) -> CommandResult:
        """
        Create a rejection result.

        A rejected command has not touched the context.

        Args:
            message: Why the command was rejected.
            data: Optional additional information.

        Returns:
            CommandResult with success=False.
        """
        return cls(success=False, message=message, data=data)


class Command(ABC):
    """
    Abstract base class for edit commands.

    Subclasses must implement:
        - description: Property returning human-readable description
        - execute(): Method to perform the operation

    Implementation Guidelines:
        1. Validate all destinations before the first write
        2. Raise IndexError for caller bugs (bad slot index)
        3. Return CommandResult.error for rejected gestures
        4. Assign context.selection once, after the document writes

    Example:
        >>> class ClearAnchorCommand(Command):
        ...     @property
        ...     def description(self) -> str:
        ...         return "Clear anchor"
        ...
        ...     def execute(self, context: EditContext) -> CommandResult:
        ...         context.table[context.anchor] = None
        ...         return CommandResult.ok()
    """

    @property
    @abstractmethod
    def description(self) -> str:
        """
        Human-readable description of the command.

        Used for operation logging and debugging.

        Example:
            >>> MoveCommand(2, 10).description
            'Move selection 2 -> 10'
        """
        pass

    @abstractmethod
    def execute(self, context: EditContext) -> CommandResult:
        """
        Execute the command against a working context.

        Args:
            context: EditContext to modify. On rejection the context
                must be left untouched.

        Returns:
            CommandResult with success status and optional message/data.
        """
        pass

    def __repr__(self) -> str:
        """Return string representation of command."""
        return f"{self.__class__.__name__}({self.description})"
