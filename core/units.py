#!/usr/bin/env python3
"""
Units Module
Numeric conversions applied by attribute semantic.
"""

import numpy as np

ROTATE_TOKEN = "rotate"


def radians_to_degrees(value):
    """Convert an angle from radians to degrees"""
    return float(np.degrees(value))


def degrees_to_radians(value):
    """Convert an angle from degrees to radians"""
    return float(np.radians(value))


def is_rotate_attribute(attribute_name):
    """True if curve values of this attribute are stored in radians"""
    return ROTATE_TOKEN in attribute_name


def convert_curve_value(attribute_name, value):
    """Convert a raw curve key value for the document

    Rotate curves are evaluated in radians by the host and reported in
    degrees. Every other curve value is returned unchanged.

    Args:
        attribute_name: Attribute name (e.g., "rotateX", "translateY")
        value: Raw key value from the host curve

    Returns:
        float: Document value
    """
    if is_rotate_attribute(attribute_name):
        return radians_to_degrees(value)
    return float(value)
