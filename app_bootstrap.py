# -*- coding: utf-8 -*-
"""
LocEdit Application Bootstrap (Composition Root)

Creates and wires the main components:
- Settings model over the JSON key-value store
- Editor controller and command dispatcher
- View (EditorWindow)
"""

from typing import Optional, Tuple

from locedit_logger import get_logger
from models.settings_model import SettingsModel, SettingsStore
from controllers.editor_controller import EditorController
from controllers.commands import CommandDispatcher

logger = get_logger("bootstrap")


def bootstrap(settings_store: Optional[SettingsStore] = None) -> Tuple[EditorController, 'EditorWindow']:
    """
    Bootstrap the application by creating and wiring all components.

    Args:
        settings_store: Key-value store for display settings
                        (defaults to ~/.locedit/settings.json)

    Returns:
        Tuple of (EditorController, EditorWindow view instance)
    """
    logger.info("=== LocEdit Bootstrap Starting ===")

    settings_model = SettingsModel(settings_store)
    controller = EditorController(settings=settings_model)
    dispatcher = CommandDispatcher(controller)

    # Imported here so the non-GUI layers load without a display
    from gui.editor_window import EditorWindow
    window = EditorWindow(controller, dispatcher)

    logger.info("=== LocEdit Bootstrap Complete ===")
    return controller, window
