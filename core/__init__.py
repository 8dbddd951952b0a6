#!/usr/bin/env python3
"""
Core Module
Attribute classification, curve/static encoding and the document model.
"""

from .anim_data import (
    Document,
    ObjectNode,
    AttributeNode,
    AttributeKind,
    AttributeWarning,
    CurvePayload,
    InfinityInfo,
    KeyRecord,
    StaticType,
)
from .attribute_classifier import Skip, Static, Animated, classify_attribute
from .curve_encoder import encode_curve, infinity_to_int, tangent_type_to_string
from .static_encoder import encode_static
from .object_serializer import serialize_object
from .settings import ExportSettings

__all__ = [
    'Document',
    'ObjectNode',
    'AttributeNode',
    'AttributeKind',
    'AttributeWarning',
    'CurvePayload',
    'InfinityInfo',
    'KeyRecord',
    'StaticType',
    'Skip',
    'Static',
    'Animated',
    'classify_attribute',
    'encode_curve',
    'infinity_to_int',
    'tangent_type_to_string',
    'encode_static',
    'serialize_object',
    'ExportSettings',
]
