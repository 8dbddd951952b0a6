#!/usr/bin/env python3
"""
Export Settings Module
Defaults for document output (destination, layout, encoding).
"""

import tempfile
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_OUTPUT_NAME = 'anim.xml'


def default_output_path() -> Path:
    """Output path used when the caller gives none"""
    return Path(tempfile.gettempdir()) / DEFAULT_OUTPUT_NAME


@dataclass
class ExportSettings:
    """Document output settings

    Attributes:
        output_path: Destination file when export() gets no path
        indent: Indentation string per nesting level
        newline: Line terminator written between elements
        encoding: Text encoding of the output file
        root_tag: Name of the document root element
    """
    output_path: Path = field(default_factory=default_output_path)
    indent: str = "    "
    newline: str = "\r\n"
    encoding: str = "utf-8"
    root_tag: str = "Data"
