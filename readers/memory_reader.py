#!/usr/bin/env python3
"""
Memory Reader Module
In-memory host scene implementing the BaseReader interface.

Used to export scenes assembled in Python (scripts, pipelines, tests)
without a live host session.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Tuple, Any, Optional

from .base_reader import (
    BaseReader, BaseAnimCurve, SceneReadError,
    AttributeType, NumericType, InfinityType, TangentType,
)


@dataclass
class MemoryKey:
    """Keyframe of a MemoryAnimCurve

    Attributes:
        time: Key time in seconds
        value: Raw value (radians for rotate curves)
        in_angle/out_angle: Tangent angles in degrees
        in_weight/out_weight: Tangent weights
    """
    time: float
    value: float
    in_tangent_type: Any = TangentType.AUTO
    out_tangent_type: Any = TangentType.AUTO
    in_angle: float = 0.0
    in_weight: float = 1.0
    out_angle: float = 0.0
    out_weight: float = 1.0
    breakdown: bool = False
    tangents_locked: bool = True
    weights_locked: bool = False


class MemoryAnimCurve(BaseAnimCurve):
    """Animation curve holding its keys in a list"""

    def __init__(self, keys: Optional[List[MemoryKey]] = None,
                 pre_infinity: Any = InfinityType.CONSTANT,
                 post_infinity: Any = InfinityType.CONSTANT,
                 weighted: bool = False):
        self.keys = list(keys or [])
        self._pre_infinity = pre_infinity
        self._post_infinity = post_infinity
        self._weighted = weighted

    @property
    def pre_infinity(self):
        return self._pre_infinity

    @property
    def post_infinity(self):
        return self._post_infinity

    @property
    def is_weighted(self):
        return self._weighted

    @property
    def num_keys(self):
        return len(self.keys)

    def time(self, index):
        return self.keys[index].time

    def value(self, index):
        return self.keys[index].value

    def is_breakdown(self, index):
        return self.keys[index].breakdown

    def tangents_locked(self, index):
        return self.keys[index].tangents_locked

    def weights_locked(self, index):
        return self.keys[index].weights_locked

    def in_tangent_type(self, index):
        return self.keys[index].in_tangent_type

    def out_tangent_type(self, index):
        return self.keys[index].out_tangent_type

    def get_tangent(self, index, in_tangent):
        key = self.keys[index]
        if in_tangent:
            return key.in_angle, key.in_weight
        return key.out_angle, key.out_weight


@dataclass
class MemoryPlug:
    """Attribute plug of a MemoryNode

    Attributes:
        name: Attribute name (the plug name is "<node>.<name>")
        attribute_type: Host attribute class
        numeric_type: Unit type for NUMERIC attributes
        value: Current value (radians for angles)
        keyable: Attribute is keyable
        connected: Attribute has an incoming connection
        error: If set, every query on this plug raises SceneReadError
    """
    name: str
    attribute_type: AttributeType = AttributeType.NUMERIC
    numeric_type: NumericType = NumericType.DOUBLE
    value: Any = 0.0
    keyable: bool = True
    connected: bool = False
    error: Optional[str] = None
    node: Optional['MemoryNode'] = field(default=None, repr=False, compare=False)


class MemoryNode:
    """Scene object with ordered plugs and curve bindings"""

    def __init__(self, name: str, parent: Optional['MemoryNode'] = None):
        self.name = name
        self.parent = parent
        self.plugs: List[MemoryPlug] = []
        self.curves: Dict[str, MemoryAnimCurve] = {}  # attribute name -> curve

    def add_plug(self, name: str, attribute_type: AttributeType = AttributeType.NUMERIC,
                 numeric_type: NumericType = NumericType.DOUBLE, value: Any = 0.0,
                 keyable: bool = True, connected: bool = False,
                 error: Optional[str] = None) -> MemoryPlug:
        """Append a plug to the node's attribute list

        Returns:
            MemoryPlug: The new plug
        """
        plug = MemoryPlug(name, attribute_type, numeric_type, value,
                          keyable, connected, error, node=self)
        self.plugs.append(plug)
        return plug

    def set_curve(self, attr_name: str, curve: MemoryAnimCurve) -> MemoryAnimCurve:
        """Drive an attribute with a curve

        The attribute does not need to be one of the node's plugs.
        """
        self.curves[attr_name] = curve
        return curve

    def get_plug(self, attr_name: str) -> Optional[MemoryPlug]:
        for plug in self.plugs:
            if plug.name == attr_name:
                return plug
        return None

    def __repr__(self):
        return f"MemoryNode({self.name})"


class MemoryReader(BaseReader):
    """BaseReader over MemoryNode objects"""

    def __init__(self, selection: Optional[List[MemoryNode]] = None):
        """Initialize reader

        Args:
            selection: Selected nodes in order (duplicates allowed)
        """
        super().__init__()
        self.selection = list(selection or [])

    def get_format_name(self) -> str:
        return "Memory"

    def get_selection(self) -> List[MemoryNode]:
        return list(self.selection)

    def get_full_path(self, obj: MemoryNode) -> str:
        parts = []
        current = obj
        while current is not None:
            parts.insert(0, current.name)
            current = current.parent
        return "|" + "|".join(parts)

    def list_plugs(self, obj: MemoryNode) -> List[MemoryPlug]:
        return list(obj.plugs)

    def _check(self, plug: MemoryPlug) -> MemoryPlug:
        if plug.error:
            raise SceneReadError(plug.error)
        return plug

    def plug_name(self, plug: Any) -> str:
        if isinstance(plug, str):
            return plug
        self._check(plug)
        owner = plug.node.name if plug.node else ""
        return f"{owner}.{plug.name}"

    def is_connected(self, plug: MemoryPlug) -> bool:
        return self._check(plug).connected

    def is_keyable(self, plug: MemoryPlug) -> bool:
        return self._check(plug).keyable

    def attribute_type(self, plug: MemoryPlug) -> AttributeType:
        return self._check(plug).attribute_type

    def numeric_type(self, plug: MemoryPlug) -> NumericType:
        plug = self._check(plug)
        if plug.attribute_type != AttributeType.NUMERIC:
            return NumericType.OTHER
        return plug.numeric_type

    def get_value(self, plug: MemoryPlug) -> Any:
        return self._check(plug).value

    def is_animated(self, obj: MemoryNode) -> bool:
        return bool(obj.curves)

    def find_animated_plugs(self, obj: MemoryNode) -> List[Tuple[Any, MemoryAnimCurve]]:
        """Get bindings as (plug, curve)

        Bindings on attributes without a MemoryPlug are reported with the
        dotted plug name as the plug handle.
        """
        bindings = []
        for attr_name, curve in obj.curves.items():
            plug = obj.get_plug(attr_name)
            bindings.append((plug if plug is not None else f"{obj.name}.{attr_name}", curve))
        return bindings
