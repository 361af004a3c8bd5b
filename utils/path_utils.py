"""
LocEdit Path Utilities
Sibling file naming for translated copies and progress files.
"""
from pathlib import Path
from typing import Union

import locedit_config as config
from locedit_logger import get_logger

logger = get_logger("utils.paths")

PathLike = Union[str, Path]


def translated_path_for(source_path: PathLike) -> Path:
    """dir/name.txt -> dir/name_translated.txt"""
    source = Path(source_path)
    return source.with_name(f"{source.stem}{config.TRANSLATED_SUFFIX}{source.suffix}")


def progress_path_for(source_path: PathLike) -> Path:
    """dir/name.txt -> dir/name_progress.json"""
    source = Path(source_path)
    return source.with_name(f"{source.stem}{config.PROGRESS_SUFFIX}{config.PROGRESS_EXTENSION}")


def resolve_working_path(source_path: PathLike) -> Path:
    """Return the translated copy when one exists, otherwise the source itself."""
    translated = translated_path_for(source_path)
    if translated.is_file():
        logger.info(f"Found translated copy: {translated}")
        return translated
    return Path(source_path)
