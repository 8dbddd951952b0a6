#!/usr/bin/env python3
"""
Attribute Classifier Module
Decides whether an attribute is skipped, exported as a static value or
exported as an animation curve
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from core.anim_data import StaticType
from readers.base_reader import AttributeType, NumericType, BaseAnimCurve

NUMERIC_STATIC_TYPES = {
    NumericType.BOOLEAN: StaticType.BOOLEAN,
    NumericType.LONG: StaticType.INTEGER,
    NumericType.DOUBLE: StaticType.REAL,
}

ATTRIBUTE_STATIC_TYPES = {
    AttributeType.DOUBLE_LINEAR: StaticType.LINEAR,
    AttributeType.DOUBLE_ANGLE: StaticType.ANGLE,
    AttributeType.ENUM: StaticType.ENUM,
}


@dataclass(frozen=True)
class Skip:
    """Attribute contributes nothing to the document"""
    reason: str


@dataclass(frozen=True)
class Static:
    """Attribute exported as its current value"""
    static_type: StaticType


@dataclass(frozen=True)
class Animated:
    """Attribute exported as an animation curve"""
    curve: BaseAnimCurve


Classification = Union[Skip, Static, Animated]


def attribute_name_from_plug(plug_name: str) -> str:
    """Get the attribute part of a dotted plug name

    "pCube1.rotateX" -> "rotateX". Only the component right after the first
    separator is used.

    Raises:
        ValueError: If the plug name has no attribute component
    """
    parts = plug_name.split('.')
    if len(parts) < 2 or not parts[1]:
        raise ValueError(f"Plug name has no attribute component: {plug_name!r}")
    return parts[1]


def get_static_type(reader, plug) -> Optional[StaticType]:
    """Map host attribute metadata to a static type

    Returns:
        StaticType, or None if the attribute type is not exportable
    """
    attr_type = reader.attribute_type(plug)
    if attr_type == AttributeType.NUMERIC:
        return NUMERIC_STATIC_TYPES.get(reader.numeric_type(plug))
    return ATTRIBUTE_STATIC_TYPES.get(attr_type)


def classify_attribute(reader, plug, animated_curves: Dict[str, Any]) -> Classification:
    """Classify one plug of an object

    A plug driven by one of the object's curves is Animated; the curve is
    the plug's incoming connection, so the curve lookup runs first. Other
    connected plugs and non-keyable plugs are skipped. Remaining plugs are
    Static when their type is exportable.

    Args:
        reader: BaseReader the plug belongs to
        plug: Plug handle
        animated_curves: Mapping of plug name -> curve for the object

    Returns:
        Skip, Static or Animated
    """
    name = reader.plug_name(plug)

    curve = animated_curves.get(name)
    if curve is not None:
        return Animated(curve)

    if reader.is_connected(plug):
        return Skip("connected")

    if not reader.is_keyable(plug):
        return Skip("not keyable")

    static_type = get_static_type(reader, plug)
    if static_type is None:
        return Skip("unsupported type")

    return Static(static_type)
