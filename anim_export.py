#!/usr/bin/env python3
"""
Animation Exporter - Main Orchestrator Module
Walks the host selection and writes every object's static attributes and
animation curves into a document

The export is a single linear pass: each selected object is serialized and
handed to the document writer before the next one is read.
"""

from pathlib import Path

from core.anim_data import AttributeWarning, Document
from core.object_serializer import serialize_object
from core.settings import ExportSettings
from exporters.xml_exporter import XMLExporter

PATH_QUERY = "<path>"


class AnimExporter:
    """Animation document assembler (orchestrator/facade)

    This class coordinates the export process:
    1. Iterate the reader's selection in order (duplicates kept)
    2. Serialize each object (classification + static/curve encoding)
    3. Stream each object node to the document writer

    Per-attribute and per-object read failures are reported as warnings
    and never stop the export. Only a failure of the output sink or of
    the selection query itself is fatal.
    """

    def __init__(self, exporter=None, settings=None, progress_callback=None):
        """Initialize exporter

        Args:
            exporter: Document writer (defaults to XMLExporter)
            settings: ExportSettings for the default writer
            progress_callback: Optional function to call for progress updates
                              Signature: callback(message: str) -> None
        """
        self.settings = settings or ExportSettings()
        self.progress_callback = progress_callback
        self.exporter = exporter or XMLExporter(self.settings, progress_callback)
        self.warnings = []

    def log(self, message):
        """Send progress updates to callback"""
        if self.progress_callback:
            self.progress_callback(message)
        print(message)

    def iter_objects(self, reader):
        """Serialize the selection one object at a time

        Warnings from each object are logged and appended to self.warnings.
        An object whose full path cannot be read is left out; its warning
        names it by selection index, e.g. "<selection 2> [<path>]: ...".

        Args:
            reader: BaseReader for the host scene

        Yields:
            ObjectNode: One node per selected object, in selection order
        """
        for index, obj in enumerate(reader.get_selection()):
            try:
                object_path = reader.get_full_path(obj)
            except Exception as e:
                warning = AttributeWarning(f"<selection {index}>", PATH_QUERY, str(e))
                self.log(f"⚠ Skipped object {warning}")
                self.warnings.append(warning)
                continue

            node, warnings = serialize_object(reader, obj, object_path)
            for warning in warnings:
                self.log(f"⚠ Skipped attribute {warning}")
            self.warnings.extend(warnings)
            yield node

    def build_document(self, reader):
        """Build the complete document in memory

        Args:
            reader: BaseReader for the host scene

        Returns:
            Document: Object nodes plus attribute warnings
        """
        self.warnings = []
        objects = list(self.iter_objects(reader))
        return Document(objects=objects, warnings=list(self.warnings))

    def write_document(self, reader, stream):
        """Stream the document into a caller-owned text stream

        Args:
            reader: BaseReader for the host scene
            stream: Writable text stream

        Returns:
            Document: The written document
        """
        self.warnings = []
        objects = []
        with self.exporter.stream_document(stream) as write:
            for node in self.iter_objects(reader):
                write(node)
                objects.append(node)
        return Document(objects=objects, warnings=list(self.warnings))

    def export(self, reader, output_path=None):
        """Export the reader's selection to a file

        The output file is opened before the scene is read; if it cannot be
        opened nothing is traversed.

        Args:
            reader: BaseReader for the host scene
            output_path: Destination file (defaults to settings.output_path)

        Returns:
            dict: Results with keys:
                - 'success': bool
                - 'files': list of created file paths
                - 'object_count': number of object nodes written
                - 'warnings': list of attribute warning strings
                - 'message': Summary message
        """
        path = Path(output_path or self.settings.output_path)
        self.warnings = []
        count = 0

        try:
            self.log(f"Exporting animation from {reader.get_format_name()} scene...")
            self.log(f"  Output: {path}")

            with self.exporter.open_document(path) as write:
                for node in self.iter_objects(reader):
                    write(node)
                    count += 1
                    self.log(f"  - {node.path}: {len(node.attributes)} attribute(s)")

            message = f"Exported {count} object(s) to {path.name}"
            if self.warnings:
                message += f" ({len(self.warnings)} warning(s))"
            self.log(f"✓ {message}")

            return {
                'success': True,
                'files': [str(path)],
                'object_count': count,
                'warnings': [str(w) for w in self.warnings],
                'message': message
            }

        except Exception as e:
            error_msg = f"Animation export failed: {str(e)}"
            self.log(f"✗ {error_msg}")
            import traceback
            self.log(traceback.format_exc())
            return {
                'success': False,
                'files': [],
                'object_count': count,
                'warnings': [str(w) for w in self.warnings],
                'message': error_msg
            }
