# -*- coding: utf-8 -*-
"""
LocEdit Controllers Package

This package contains the Controller layer of MVC/MVP architecture.
Controllers handle business logic and coordinate between Models and Views.
"""

from controllers.editor_controller import EditorController
from controllers.commands import CommandDispatcher

__all__ = [
    'EditorController',
    'CommandDispatcher',
]
