"""
Core Utilities Module.

This module provides file helpers shared by the report writer, the known-word
store and the command line interface.
"""

from pathlib import Path
from typing import Union


def ensure_dir_exists(directory_path: Union[str, Path]) -> Path:
    """
    Ensure that a directory exists, creating it if necessary.

    Args:
        directory_path: Path to the directory

    Returns:
        Path: Path to the directory
    """
    path = Path(directory_path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_file_contents(file_path: Union[str, Path], encoding: str = "utf-8") -> str:
    """
    Read the contents of a file.

    Args:
        file_path: Path to the file
        encoding: File encoding (default: utf-8)

    Returns:
        str: Contents of the file
    """
    with open(file_path, "r", encoding=encoding) as f:
        return f.read()


def write_file_contents(file_path: Union[str, Path], contents: str, encoding: str = "utf-8") -> None:
    """
    Write contents to a file, creating parent directories as needed.

    Args:
        file_path: Path to the file
        contents: Contents to write
        encoding: File encoding (default: utf-8)
    """
    ensure_dir_exists(Path(file_path).parent)
    with open(file_path, "w", encoding=encoding) as f:
        f.write(contents)
