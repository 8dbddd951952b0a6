#!/usr/bin/env python3
"""
Exporters Module
Document writers for exported animation (XML)
"""

from .base_exporter import BaseExporter
from .xml_exporter import XMLExporter

__all__ = [
    'BaseExporter',
    'XMLExporter',
]
