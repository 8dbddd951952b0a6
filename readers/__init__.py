#!/usr/bin/env python3
"""
Readers Module
Read-only host scene access (Maya ASCII files, in-memory scenes)
"""

from pathlib import Path

from .base_reader import (
    BaseReader,
    BaseAnimCurve,
    SceneReadError,
    AttributeType,
    NumericType,
    InfinityType,
    TangentType,
)
from .memory_reader import MemoryReader, MemoryNode, MemoryPlug, MemoryAnimCurve, MemoryKey

# Supported file extensions
MAYA_EXTENSIONS = {'.ma'}
SUPPORTED_EXTENSIONS = MAYA_EXTENSIONS


def create_reader(input_file, selection=None):
    """Factory function to create appropriate reader based on file extension

    Args:
        input_file: Path to input scene file
        selection: Optional node names to export, in order

    Returns:
        BaseReader: MayaReader instance

    Raises:
        ValueError: If file extension is not supported
    """
    path = Path(input_file)
    ext = path.suffix.lower()

    if ext in MAYA_EXTENSIONS:
        # Lazy import to avoid loading parser when not needed
        from .maya_reader import MayaReader
        return MayaReader(input_file, selection=selection)
    else:
        raise ValueError(
            f"Unsupported file format: {ext}\n"
            f"Supported formats: {', '.join(sorted(SUPPORTED_EXTENSIONS))}"
        )


def is_supported_format(input_file):
    """Check if a file has a supported format

    Args:
        input_file: Path to input scene file

    Returns:
        bool: True if format is supported
    """
    ext = Path(input_file).suffix.lower()
    return ext in SUPPORTED_EXTENSIONS


__all__ = [
    'BaseReader',
    'BaseAnimCurve',
    'SceneReadError',
    'AttributeType',
    'NumericType',
    'InfinityType',
    'TangentType',
    'MemoryReader',
    'MemoryNode',
    'MemoryPlug',
    'MemoryAnimCurve',
    'MemoryKey',
    'create_reader',
    'is_supported_format',
    'MAYA_EXTENSIONS',
    'SUPPORTED_EXTENSIONS',
]
