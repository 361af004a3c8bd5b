"""
LocEdit Enum Definitions
"""

from enum import Enum


class TextAlignment(str, Enum):
    """Text alignment for the original/translation panes"""
    LEFT = 'left'
    CENTER = 'center'
    RIGHT = 'right'
    JUSTIFY = 'justify'


class ExportMode(str, Enum):
    """Where an export is written"""
    NEW_FILE = 'new_file'
    OVERWRITE = 'overwrite'
