#!/usr/bin/env python3
"""
Object Serializer Module
Classifies and encodes every attribute of one object into an ObjectNode
"""

from typing import List, Tuple

from core.anim_data import AttributeKind, AttributeNode, AttributeWarning, ObjectNode
from core.attribute_classifier import (
    Animated, Static, attribute_name_from_plug, classify_attribute
)
from core.curve_encoder import encode_curve
from core.static_encoder import encode_static

# Plug labels for warnings about object-level queries
ANIMATION_QUERY = "<animation>"
ATTRIBUTE_QUERY = "<attributes>"


def _keyed_node(attribute_name, curve):
    return AttributeNode(
        name=attribute_name,
        kind=AttributeKind.KEYED,
        curve=encode_curve(attribute_name, curve),
    )


def _safe_plug_name(reader, plug):
    """Plug name for diagnostics; never raises"""
    try:
        return reader.plug_name(plug)
    except Exception:
        return repr(plug)


def serialize_object(reader, obj, object_path) -> Tuple[ObjectNode, List[AttributeWarning]]:
    """Serialize one object's static and keyed attributes

    Plugs are visited once each, in host order. A failure while handling a
    plug is recorded as a warning and the remaining plugs are still
    exported. Curve bindings on plugs the host did not enumerate are
    appended after the enumerated plugs, in binding order.
    If the animation or attribute query for the whole object fails, the
    failure is recorded under the <animation> or <attributes> label and the
    rest of the object is still serialized.

    Args:
        reader: BaseReader for the host scene
        obj: Object handle from reader.get_selection()
        object_path: Full path of the object

    Returns:
        tuple: (ObjectNode, list of AttributeWarning)
    """
    attributes: List[AttributeNode] = []
    warnings: List[AttributeWarning] = []
    emitted = set()

    # plug name -> curve, in binding order
    animated_curves = {}
    try:
        bindings = list(reader.find_animated_plugs(obj)) if reader.is_animated(obj) else []
    except Exception as e:
        bindings = []
        warnings.append(AttributeWarning(object_path, ANIMATION_QUERY, str(e)))
    for plug, curve in bindings:
        try:
            animated_curves.setdefault(reader.plug_name(plug), curve)
        except Exception as e:
            warnings.append(AttributeWarning(object_path, _safe_plug_name(reader, plug), str(e)))

    try:
        plugs = list(reader.list_plugs(obj))
    except Exception as e:
        plugs = []
        warnings.append(AttributeWarning(object_path, ATTRIBUTE_QUERY, str(e)))

    visited = set()
    for plug in plugs:
        try:
            plug_name = reader.plug_name(plug)
            visited.add(plug_name)

            classification = classify_attribute(reader, plug, animated_curves)
            if isinstance(classification, Animated):
                attribute_name = attribute_name_from_plug(plug_name)
                node = _keyed_node(attribute_name, classification.curve)
            elif isinstance(classification, Static):
                attribute_name = attribute_name_from_plug(plug_name)
                node = encode_static(attribute_name, classification.static_type,
                                     reader.get_value(plug))
            else:
                continue

            if node is not None and node.name not in emitted:
                emitted.add(node.name)
                attributes.append(node)

        except Exception as e:
            warnings.append(AttributeWarning(object_path, _safe_plug_name(reader, plug), str(e)))

    for plug_name, curve in animated_curves.items():
        if plug_name in visited:
            continue
        try:
            node = _keyed_node(attribute_name_from_plug(plug_name), curve)
            if node.name not in emitted:
                emitted.add(node.name)
                attributes.append(node)
        except Exception as e:
            warnings.append(AttributeWarning(object_path, plug_name, str(e)))

    return ObjectNode(path=object_path, attributes=tuple(attributes)), warnings
