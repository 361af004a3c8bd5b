# -*- coding: utf-8 -*-
"""
LocEdit Host Commands

The closed set of operations the editing surface can request, as typed
values instead of string-tagged messages.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple, Type

from locedit_logger import get_logger
from locedit_exceptions import CommandError
from models.settings_model import DisplaySettings

logger = get_logger("controllers.commands")


@dataclass(frozen=True)
class UpdateTranslation:
    index: int
    translation: str


@dataclass(frozen=True)
class MarkCompleted:
    index: int


@dataclass(frozen=True)
class ExportFile:
    """Export with the surface's view of every entry (synced by index first)."""
    entries: Optional[List[Any]] = None


@dataclass(frozen=True)
class SaveSettings:
    settings: DisplaySettings = field(default_factory=DisplaySettings)


@dataclass(frozen=True)
class LoadSettings:
    pass


COMMAND_TYPES: Tuple[Type, ...] = (
    UpdateTranslation,
    MarkCompleted,
    ExportFile,
    SaveSettings,
    LoadSettings,
)


class CommandDispatcher:
    """
    Routes host commands to the editor controller.

    Each command type has exactly one branch; anything else raises
    CommandError instead of being silently dropped.
    """

    def __init__(self, controller):
        self._controller = controller

    def dispatch(self, command) -> Any:
        """
        Execute a command synchronously.

        Returns:
            The handler's result (bool for edits, ExportResult for exports,
            DisplaySettings for LoadSettings)
        """
        logger.debug(f"Dispatching {command!r}")

        if isinstance(command, UpdateTranslation):
            return self._controller.set_translation(command.index, command.translation)
        if isinstance(command, MarkCompleted):
            return self._controller.mark_completed(command.index)
        if isinstance(command, ExportFile):
            return self._controller.export_now(command.entries)
        if isinstance(command, SaveSettings):
            return self._controller.settings.save(command.settings)
        if isinstance(command, LoadSettings):
            return self._controller.settings.load()

        raise CommandError(f"Unsupported command: {type(command).__name__}", command=command)
