#!/usr/bin/env python3
"""
Base Reader Module
Abstract read-only interface to a host scene (selection, attributes, curves)
"""

from abc import ABC, abstractmethod
from enum import Enum, IntEnum
from pathlib import Path
from typing import List, Tuple, Any, Optional


class SceneReadError(Exception):
    """Raised when the host scene cannot answer a query"""
    pass


class InfinityType(IntEnum):
    """Curve infinity behavior, numbered like the host API"""
    CONSTANT = 0
    LINEAR = 1
    CYCLE = 3
    CYCLE_RELATIVE = 4
    OSCILLATE = 5


class TangentType(IntEnum):
    """Key tangent type, numbered like the host API"""
    GLOBAL = 0
    FIXED = 1
    LINEAR = 2
    FLAT = 3
    SMOOTH = 4
    STEP = 5
    SLOW = 6
    FAST = 7
    CLAMPED = 8
    PLATEAU = 9
    STEP_NEXT = 10
    AUTO = 18


class AttributeType(Enum):
    """Host attribute class"""
    NUMERIC = "numeric"
    DOUBLE_LINEAR = "doubleLinear"
    DOUBLE_ANGLE = "doubleAngle"
    ENUM = "enum"
    OTHER = "other"


class NumericType(Enum):
    """Unit type of a NUMERIC attribute"""
    BOOLEAN = "bool"
    SHORT = "short"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    OTHER = "other"


class BaseAnimCurve(ABC):
    """Abstract animation curve bound to one plug

    Keys are addressed by index 0..num_keys-1 in host order (time ascending).
    """

    @property
    @abstractmethod
    def pre_infinity(self) -> Any:
        """Infinity behavior before the first key (InfinityType or raw value)"""
        pass

    @property
    @abstractmethod
    def post_infinity(self) -> Any:
        """Infinity behavior after the last key"""
        pass

    @property
    @abstractmethod
    def is_weighted(self) -> bool:
        """True if the curve has weighted tangents"""
        pass

    @property
    @abstractmethod
    def num_keys(self) -> int:
        pass

    @abstractmethod
    def time(self, index: int) -> float:
        """Key time in seconds"""
        pass

    @abstractmethod
    def value(self, index: int) -> float:
        """Raw key value (radians for angular curves)"""
        pass

    @abstractmethod
    def is_breakdown(self, index: int) -> bool:
        pass

    @abstractmethod
    def tangents_locked(self, index: int) -> bool:
        pass

    @abstractmethod
    def weights_locked(self, index: int) -> bool:
        pass

    @abstractmethod
    def in_tangent_type(self, index: int) -> Any:
        """Incoming tangent type (TangentType or raw value)"""
        pass

    @abstractmethod
    def out_tangent_type(self, index: int) -> Any:
        """Outgoing tangent type (TangentType or raw value)"""
        pass

    @abstractmethod
    def get_tangent(self, index: int, in_tangent: bool) -> Tuple[float, float]:
        """Get one side of a key's tangent

        Args:
            index: Key index
            in_tangent: True for the incoming side, False for the outgoing side

        Returns:
            tuple: (angle in degrees, weight)
        """
        pass


class BaseReader(ABC):
    """Abstract base class for host scene readers

    Provides a consistent, read-only interface to a host scene. The export
    core only talks to the scene through these methods, so any host (a live
    session, a parsed scene file, an in-memory fixture) can be exported.

    Object and plug handles are opaque to the core; they are only passed
    back to the reader that produced them.
    """

    def __init__(self, file_path: Optional[str] = None):
        """Initialize reader

        Args:
            file_path: Path to the scene file, None for non-file hosts
        """
        self.file_path = Path(file_path) if file_path else None

    @abstractmethod
    def get_format_name(self) -> str:
        """Return human-readable host name (e.g., 'Maya ASCII', 'Memory')"""
        pass

    @abstractmethod
    def get_selection(self) -> List[Any]:
        """Get selected objects in selection order

        Returns:
            list: Object handles (duplicates preserved)
        """
        pass

    @abstractmethod
    def get_full_path(self, obj: Any) -> str:
        """Get the unique hierarchy path of an object (e.g., "|group1|pCube1")"""
        pass

    @abstractmethod
    def list_plugs(self, obj: Any) -> List[Any]:
        """Get all attribute plugs of an object in host attribute order"""
        pass

    @abstractmethod
    def plug_name(self, plug: Any) -> str:
        """Get dotted plug name ("pCube1.translateX")"""
        pass

    @abstractmethod
    def is_connected(self, plug: Any) -> bool:
        """True if the plug has an incoming connection"""
        pass

    @abstractmethod
    def is_keyable(self, plug: Any) -> bool:
        pass

    @abstractmethod
    def attribute_type(self, plug: Any) -> AttributeType:
        pass

    @abstractmethod
    def numeric_type(self, plug: Any) -> NumericType:
        """Unit type of a NUMERIC plug (NumericType.OTHER for other classes)"""
        pass

    @abstractmethod
    def get_value(self, plug: Any) -> Any:
        """Current plug value (bool, int or float; angles in radians)"""
        pass

    @abstractmethod
    def is_animated(self, obj: Any) -> bool:
        """True if any animation curve drives the object"""
        pass

    @abstractmethod
    def find_animated_plugs(self, obj: Any) -> List[Tuple[Any, BaseAnimCurve]]:
        """Get (plug, curve) bindings driving the object

        Returns:
            list: (plug, curve) tuples in host order
        """
        pass
