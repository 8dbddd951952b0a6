#!/usr/bin/env python3
"""
Static Encoder Module
Snapshots the current value of a non-animated attribute
"""

from core.anim_data import AttributeKind, AttributeNode, StaticType
from core.units import radians_to_degrees

# Static types dropped from the document when their value is zero
ZERO_SUPPRESSED_TYPES = {StaticType.LINEAR, StaticType.ANGLE}


def format_bool(value):
    return "True" if value else "False"


def format_real(value):
    """Shortest text that round-trips the float"""
    return repr(float(value))


def format_int(value):
    return str(int(value))


def format_static_value(static_type, value):
    """Format an already-converted value as canonical text"""
    if static_type == StaticType.BOOLEAN:
        return format_bool(value)
    if static_type in (StaticType.INTEGER, StaticType.ENUM):
        return format_int(value)
    return format_real(value)


def convert_static_value(static_type, raw_value):
    """Coerce a raw host value to the static type's document value"""
    if static_type == StaticType.BOOLEAN:
        return bool(raw_value)
    if static_type in (StaticType.INTEGER, StaticType.ENUM):
        return int(raw_value)
    if static_type == StaticType.ANGLE:
        return radians_to_degrees(raw_value)
    return float(raw_value)


def encode_static(attribute_name, static_type, raw_value):
    """Build the static AttributeNode for an attribute

    Linear and angle values equal to zero (after conversion to degrees) are
    omitted. Boolean, integer, real and enum values are always kept.

    Args:
        attribute_name: Attribute name for the node
        static_type: StaticType from the classifier
        raw_value: Host value (radians for angles)

    Returns:
        AttributeNode, or None if the value is suppressed
    """
    value = convert_static_value(static_type, raw_value)
    if static_type in ZERO_SUPPRESSED_TYPES and value == 0:
        return None

    return AttributeNode(
        name=attribute_name,
        kind=AttributeKind.STATIC,
        value=format_static_value(static_type, value),
    )
