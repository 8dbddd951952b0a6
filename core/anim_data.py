#!/usr/bin/env python3
"""
Animation Data Module
Format-agnostic document model for exported animation.

This module defines the intermediate structures that decouple the
classification/encoding core from the document writers (XML, ...). The core
builds these nodes from a reader, and exporters serialize them without any
knowledge of the host scene.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from enum import Enum


class AttributeKind(Enum):
    """How an attribute node carries its value"""
    STATIC = "static"
    KEYED = "keyed"


class StaticType(Enum):
    """Semantic type of a non-animated attribute"""
    BOOLEAN = "boolean"
    INTEGER = "integer"
    REAL = "real"
    LINEAR = "linear"    # distance, suppressed when zero
    ANGLE = "angle"      # radians on the host, degrees in the document
    ENUM = "enum"


@dataclass(frozen=True)
class InfinityInfo:
    """Curve extrapolation behavior and weighting

    Attributes:
        pre_infinity: Encoded pre-infinity (0, 1, 3, 4 or 5)
        post_infinity: Encoded post-infinity (0, 1, 3, 4 or 5)
        weighted_tangents: True if the curve uses weighted tangents
    """
    pre_infinity: int
    post_infinity: int
    weighted_tangents: bool


@dataclass(frozen=True)
class KeyRecord:
    """Single keyframe of an animation curve

    Attributes:
        time: Key time in seconds
        value: Key value, converted to degrees for rotate attributes
        breakdown: 1 if the key is a breakdown, 0 otherwise
        tangents_locked: In/out tangents locked together
        weights_locked: Tangent weights locked
        in_tangent_type: Tag of the incoming tangent ("auto", "linear", ...)
        out_tangent_type: Tag of the outgoing tangent
        in_angle: Incoming tangent angle in degrees
        in_weight: Incoming tangent weight
        out_angle: Outgoing tangent angle in degrees
        out_weight: Outgoing tangent weight
    """
    time: float
    value: float
    breakdown: int
    tangents_locked: bool
    weights_locked: bool
    in_tangent_type: str
    out_tangent_type: str
    in_angle: float
    in_weight: float
    out_angle: float
    out_weight: float


@dataclass(frozen=True)
class CurvePayload:
    """Complete curve data: infinity descriptor followed by keys"""
    infinity: InfinityInfo
    keys: Tuple[KeyRecord, ...]


@dataclass(frozen=True)
class AttributeNode:
    """One exported attribute of an object

    Attributes:
        name: Attribute name taken from the host plug name ("rotateX")
        kind: STATIC or KEYED
        value: Canonical value text for static attributes
        curve: Curve payload for keyed attributes
    """
    name: str
    kind: AttributeKind
    value: Optional[str] = None
    curve: Optional[CurvePayload] = None


@dataclass(frozen=True)
class ObjectNode:
    """Exported object: host path plus its attributes in host order"""
    path: str
    attributes: Tuple[AttributeNode, ...]

    def get_attribute(self, name: str) -> Optional[AttributeNode]:
        """Find attribute node by name

        Args:
            name: Attribute name to find

        Returns:
            AttributeNode if found, None otherwise
        """
        for attr in self.attributes:
            if attr.name == name:
                return attr
        return None


@dataclass(frozen=True)
class AttributeWarning:
    """Diagnostic for an attribute that could not be exported"""
    object_path: str
    plug_name: str
    message: str

    def __str__(self):
        return f"{self.object_path} [{self.plug_name}]: {self.message}"


@dataclass
class Document:
    """Complete exported document

    Attributes:
        objects: Object nodes in selection order
        warnings: Per-attribute failures collected during export
    """
    objects: List[ObjectNode] = field(default_factory=list)
    warnings: List[AttributeWarning] = field(default_factory=list)

    def get_object(self, path: str) -> Optional[ObjectNode]:
        """Find the first object node with the given path"""
        for obj in self.objects:
            if obj.path == path:
                return obj
        return None
