# -*- coding: utf-8 -*-
"""
LocEdit File I/O

Whole-file text reads and writes. Line separators and byte-order marks
are passed through untouched so exported files differ from their source
only where a translation was patched.
"""

from pathlib import Path
from typing import Union

import locedit_config as config
from locedit_exceptions import FileOperationError
from locedit_logger import get_logger

logger = get_logger("core.file_io")

PathLike = Union[str, Path]


def read_text(file_path: PathLike) -> str:
    """
    Read a whole text file without newline translation.

    Raises:
        FileOperationError: missing, unreadable or not valid UTF-8
    """
    path = Path(file_path)
    if not path.is_file():
        raise FileOperationError(f"File not found: {path}", file_path=str(path), operation='read')
    try:
        with open(path, 'r', encoding=config.FILE_ENCODING, newline='') as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileOperationError(f"Could not read {path}: {e}", file_path=str(path), operation='read') from e
    logger.debug(f"Read {path} ({len(content)} chars)")
    return content


def write_text(file_path: PathLike, content: str):
    """
    Replace a file's content in one write. No partial-write recovery.

    Raises:
        FileOperationError: the file could not be written
    """
    path = Path(file_path)
    try:
        with open(path, 'w', encoding=config.FILE_ENCODING, newline='') as f:
            f.write(content)
    except OSError as e:
        raise FileOperationError(f"Could not write {path}: {e}", file_path=str(path), operation='write') from e
    logger.debug(f"Wrote {path} ({len(content)} chars)")
