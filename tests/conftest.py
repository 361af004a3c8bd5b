# -*- coding: utf-8 -*-
"""
LocEdit Test Fixtures

Shared fixtures for all tests.
"""

import pytest
import sys
import os
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================

@pytest.fixture
def sample_lines() -> list:
    """Sample localization file lines for testing."""
    return [
        '// Chapter 1',
        '"Hello, traveler!" -> "Hello, traveler!"',
        '',
        "'Open the door.' -> ''  // cmd_042",
        '    "It\'s late." -> "늦었어."',
        'not an entry line',
        '"" -> "empty original"',
    ]


@pytest.fixture
def sample_text(sample_lines) -> str:
    return '\n'.join(sample_lines) + '\n'


# =============================================================================
# MODEL FIXTURES
# =============================================================================

@pytest.fixture
def settings_model():
    """SettingsModel over an in-memory store."""
    from models.settings_model import SettingsModel, MemorySettingsStore
    return SettingsModel(MemorySettingsStore())


@pytest.fixture
def entries(sample_text):
    """Entries parsed from the sample text."""
    from parser.core import parse_text
    return parse_text(sample_text)


# =============================================================================
# CONTROLLER FIXTURES
# =============================================================================

@pytest.fixture
def controller(qapp, settings_model):
    """EditorController with no file open."""
    from controllers.editor_controller import EditorController
    return EditorController(settings=settings_model)


@pytest.fixture
def dispatcher(controller):
    from controllers.commands import CommandDispatcher
    return CommandDispatcher(controller)


@pytest.fixture
def opened_controller(controller, source_file):
    """EditorController with the sample file open."""
    controller.open_file(str(source_file))
    return controller


# =============================================================================
# TEMP FILE FIXTURES
# =============================================================================

@pytest.fixture
def source_file(tmp_path, sample_text) -> Path:
    """Create a temporary source file for testing."""
    file_path = tmp_path / "dialogue.txt"
    file_path.write_bytes(sample_text.encode('utf-8'))
    return file_path
