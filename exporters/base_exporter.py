#!/usr/bin/env python3
"""
Base Exporter Module
Abstract base class ensuring consistent interface across all document writers

Exporters receive ObjectNodes one at a time, so a document is written
incrementally in selection order while the scene is being traversed.
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from core.settings import ExportSettings

if TYPE_CHECKING:
    from core.anim_data import ObjectNode


class BaseExporter(ABC):
    """Abstract base class for all document writers

    Provides consistent interface and common utilities for all exporters.
    Each syntax (XML, ...) inherits from this class.

    Key principles:
    - Single Responsibility: Each exporter handles ONE syntax
    - Streaming: begin_document / write_object / end_document
    - Shared Utilities: logging, path validation, sink lifetime provided here
    """

    def __init__(self, settings: Optional[ExportSettings] = None, progress_callback=None):
        """Initialize exporter

        Args:
            settings: Output settings (defaults to ExportSettings())
            progress_callback: Optional function to call for progress updates
                              Signature: callback(message: str) -> None
        """
        self.settings = settings or ExportSettings()
        self.progress_callback = progress_callback

    def log(self, message):
        """Send progress/status message

        Args:
            message: Message to log
        """
        if self.progress_callback:
            self.progress_callback(message)
        print(message)

    @abstractmethod
    def get_format_name(self):
        """Return human-readable format name (e.g., "XML")"""
        pass

    @abstractmethod
    def get_file_extension(self):
        """Return primary file extension without dot (e.g., "xml")"""
        pass

    @abstractmethod
    def begin_document(self, stream):
        """Write the document prologue to a text stream"""
        pass

    @abstractmethod
    def write_object(self, stream, node: 'ObjectNode'):
        """Write one complete object node"""
        pass

    @abstractmethod
    def end_document(self, stream):
        """Close every open element of the document"""
        pass

    def validate_output_path(self, output_path):
        """Validate output file path and create its directory if needed

        Args:
            output_path: File path to validate

        Returns:
            Path: Validated Path object

        Raises:
            ValueError: If path is invalid
        """
        path = Path(output_path)

        if path.is_dir():
            raise ValueError(f"Output path is a directory: {path}")

        # Create directory if it doesn't exist
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except Exception as e:
            raise ValueError(f"Cannot create output directory {path.parent}: {e}")

        return path

    @contextmanager
    def stream_document(self, stream):
        """Write a document into a caller-owned text stream

        The document is closed even if the body raises, so the stream
        always holds a well-formed document.

        Yields:
            callable: write(node) appending one ObjectNode
        """
        self.begin_document(stream)
        try:
            yield lambda node: self.write_object(stream, node)
        finally:
            self.end_document(stream)
            stream.flush()

    @contextmanager
    def open_document(self, output_path=None):
        """Create/overwrite the output file and write a document into it

        Args:
            output_path: Destination file (defaults to settings.output_path)

        Yields:
            callable: write(node) appending one ObjectNode

        Raises:
            ValueError: If the output file cannot be opened
        """
        path = self.validate_output_path(output_path or self.settings.output_path)
        try:
            stream = open(path, 'w', encoding=self.settings.encoding, newline='')
        except OSError as e:
            raise ValueError(f"Cannot open output file {path}: {e}")

        with stream:
            with self.stream_document(stream) as write:
                yield write
