#!/usr/bin/env python3
"""
Maya ASCII Reader Module
Pure Python parser for Maya ASCII (.ma) files implementing the BaseReader interface.

No Maya installation required - parses the text format directly.
"""

import math
import re
from pathlib import Path
from typing import List, Dict, Tuple, Any, Optional

from core.units import degrees_to_radians
from .base_reader import (
    BaseReader, BaseAnimCurve, SceneReadError,
    AttributeType, NumericType, InfinityType, TangentType,
)

NUMBER_PATTERN = r'[-+]?\d*\.?\d+(?:[eE][-+]?\d+)?'

# Node types that get the built-in transform channels
TRANSFORM_NODE_TYPES = {'transform', 'joint'}

# (long name, short name, attribute type, numeric type, default, keyable)
TRANSFORM_ATTRIBUTES = [
    ('visibility', 'v', AttributeType.NUMERIC, NumericType.BOOLEAN, True, True),
    ('translateX', 'tx', AttributeType.DOUBLE_LINEAR, NumericType.OTHER, 0.0, True),
    ('translateY', 'ty', AttributeType.DOUBLE_LINEAR, NumericType.OTHER, 0.0, True),
    ('translateZ', 'tz', AttributeType.DOUBLE_LINEAR, NumericType.OTHER, 0.0, True),
    ('rotateX', 'rx', AttributeType.DOUBLE_ANGLE, NumericType.OTHER, 0.0, True),
    ('rotateY', 'ry', AttributeType.DOUBLE_ANGLE, NumericType.OTHER, 0.0, True),
    ('rotateZ', 'rz', AttributeType.DOUBLE_ANGLE, NumericType.OTHER, 0.0, True),
    ('scaleX', 'sx', AttributeType.NUMERIC, NumericType.DOUBLE, 1.0, True),
    ('scaleY', 'sy', AttributeType.NUMERIC, NumericType.DOUBLE, 1.0, True),
    ('scaleZ', 'sz', AttributeType.NUMERIC, NumericType.DOUBLE, 1.0, True),
    ('rotateOrder', 'ro', AttributeType.ENUM, NumericType.OTHER, 0, False),
]

# Compound transform attributes (long and short) -> child long names
COMPOUND_ATTRIBUTES = {
    'translate': ('translateX', 'translateY', 'translateZ'),
    't': ('translateX', 'translateY', 'translateZ'),
    'rotate': ('rotateX', 'rotateY', 'rotateZ'),
    'r': ('rotateX', 'rotateY', 'rotateZ'),
    'scale': ('scaleX', 'scaleY', 'scaleZ'),
    's': ('scaleX', 'scaleY', 'scaleZ'),
}

# animCurve kit/kot values (DG tangentType enum) -> TangentType
MA_TANGENT_AUTO = 18
MA_TANGENT_TYPES = {
    0: TangentType.GLOBAL,
    1: TangentType.FIXED,
    2: TangentType.LINEAR,
    3: TangentType.FLAT,
    4: TangentType.SMOOTH,
    5: TangentType.STEP,
    6: TangentType.SLOW,
    7: TangentType.FAST,
    9: TangentType.SMOOTH,  # spline
    10: TangentType.CLAMPED,
    11: TangentType.PLATEAU,
    12: TangentType.STEP_NEXT,
    MA_TANGENT_AUTO: TangentType.AUTO,
}

# addAttr -at value -> (attribute type, numeric type)
ADD_ATTR_TYPES = {
    'bool': (AttributeType.NUMERIC, NumericType.BOOLEAN),
    'long': (AttributeType.NUMERIC, NumericType.LONG),
    'short': (AttributeType.NUMERIC, NumericType.SHORT),
    'float': (AttributeType.NUMERIC, NumericType.FLOAT),
    'double': (AttributeType.NUMERIC, NumericType.DOUBLE),
    'doubleLinear': (AttributeType.DOUBLE_LINEAR, NumericType.OTHER),
    'doubleAngle': (AttributeType.DOUBLE_ANGLE, NumericType.OTHER),
    'enum': (AttributeType.ENUM, NumericType.OTHER),
}

# animCurve long attribute names -> short names
CURVE_ATTR_ALIASES = {
    'keyTimeValue': 'ktv',
    'keyTanInType': 'kit',
    'keyTanOutType': 'kot',
    'keyTanInX': 'kix',
    'keyTanInY': 'kiy',
    'keyTanOutX': 'kox',
    'keyTanOutY': 'koy',
    'keyTanLocked': 'kl',
    'keyWeightLocked': 'kwl',
    'keyBreakdown': 'kbd',
    'weightedTangents': 'wgt',
    'preInfinity': 'pre',
    'postInfinity': 'pst',
}

BOOL_TOKENS = {
    'yes': True, 'true': True, 'on': True,
    'no': False, 'false': False, 'off': False,
}

ANGULAR_DEGREE_UNITS = {'deg', 'degree'}


def _parse_token(token: str) -> Any:
    """Convert a setAttr value token to bool or float"""
    lowered = token.lower()
    if lowered in BOOL_TOKENS:
        return BOOL_TOKENS[lowered]
    return float(token)


def _parse_flag_bool(line: str, flag: str) -> Optional[bool]:
    """Read an on/off style flag (-k on, -k true, -k 1)"""
    match = re.search(r'(?:^|\s)' + re.escape(flag) + r'\s+(\w+)', line)
    if not match:
        return None
    value = match.group(1).lower()
    if value in BOOL_TOKENS:
        return BOOL_TOKENS[value]
    return value not in ('0',)


def _node_name(reference: str) -> str:
    """Short node name from a DAG path reference ("|grp|pCube1" -> "pCube1")"""
    return reference.split('|')[-1]


class MayaAttribute:
    """Attribute plug of a parsed Maya node"""

    def __init__(self, long_name: str, short_name: str, attribute_type: AttributeType,
                 numeric_type: NumericType, value: Any, keyable: bool):
        self.long_name = long_name
        self.short_name = short_name
        self.attribute_type = attribute_type
        self.numeric_type = numeric_type
        self.value = value
        self.keyable = keyable
        self.node: Optional['MayaNode'] = None

    def __repr__(self):
        return f"MayaAttribute({self.long_name})"


class MayaNode:
    """Parsed Maya node with its attributes in declaration order"""

    def __init__(self, name: str, node_type: str, parent_name: Optional[str] = None,
                 shared: bool = False):
        self.name = name
        self.node_type = node_type  # 'transform', 'joint', 'mesh', ...
        self.parent_name = parent_name
        self.shared = shared
        self.attributes: Dict[str, MayaAttribute] = {}
        self.children: List['MayaNode'] = []
        self._parent: Optional['MayaNode'] = None

        if node_type in TRANSFORM_NODE_TYPES:
            for long_name, short_name, attr_type, num_type, default, keyable in TRANSFORM_ATTRIBUTES:
                self.add_attribute(MayaAttribute(long_name, short_name, attr_type,
                                                 num_type, default, keyable))

    def add_attribute(self, attribute: MayaAttribute):
        attribute.node = self
        self.attributes[attribute.long_name] = attribute

    def get_attribute(self, name: str) -> Optional[MayaAttribute]:
        """Find attribute by long or short name"""
        if name in self.attributes:
            return self.attributes[name]
        for attribute in self.attributes.values():
            if attribute.short_name == name:
                return attribute
        return None

    def get_full_path(self) -> str:
        """Full DAG path ("|group1|pCube1")"""
        parts = [self.name]
        current = self._parent
        while current is not None:
            parts.insert(0, current.name)
            current = current._parent
        return "|" + "|".join(parts)

    def __repr__(self):
        return f"MayaNode({self.name}, {self.node_type})"


class MayaAnimCurve(BaseAnimCurve):
    """Parsed animCurve node

    Raw data is stored as written in the file (frames, UI units) and
    converted on access: times to seconds for time-input curves and
    angular values to radians.
    """

    def __init__(self, name: str, curve_type: str):
        self.name = name
        self.curve_type = curve_type  # 'TL' (translate), 'TA' (angle/rotate), 'TU' (unitless)
        self.keyframes: List[Tuple[float, float]] = []  # [(frame, value), ...]
        self.key_attrs: Dict[str, Dict[int, Any]] = {}  # 'kit' -> {index: value}
        self.weighted = False
        self.pre = 0
        self.pst = 0
        self.fps = 24.0
        self.angles_in_degrees = True

    @property
    def pre_infinity(self):
        return self.pre

    @property
    def post_infinity(self):
        return self.pst

    @property
    def is_weighted(self):
        return self.weighted

    @property
    def num_keys(self):
        return len(self.keyframes)

    def _key_attr(self, attr: str, index: int, default: Any) -> Any:
        return self.key_attrs.get(attr, {}).get(index, default)

    def time(self, index):
        frame = self.keyframes[index][0]
        if self.curve_type.startswith('T'):
            return frame / self.fps
        return frame

    def value(self, index):
        value = self.keyframes[index][1]
        if self.curve_type.endswith('A') and self.angles_in_degrees:
            return degrees_to_radians(value)
        return value

    def is_breakdown(self, index):
        return bool(self._key_attr('kbd', index, False))

    def tangents_locked(self, index):
        return bool(self._key_attr('kl', index, True))

    def weights_locked(self, index):
        return bool(self._key_attr('kwl', index, True))

    def _tangent_type(self, attr, index):
        code = int(self._key_attr(attr, index, MA_TANGENT_AUTO))
        return MA_TANGENT_TYPES.get(code, TangentType.AUTO)

    def in_tangent_type(self, index):
        return self._tangent_type('kit', index)

    def out_tangent_type(self, index):
        return self._tangent_type('kot', index)

    def get_tangent(self, index, in_tangent):
        """Tangent from the stored x/y components

        The file only stores kix/kiy/kox/koy for keys whose tangents were
        edited or locked by hand. For all other keys Maya recomputes the
        tangent from the tangent type when the scene is loaded, which this
        reader does not do. Those keys report a placeholder of angle 0 and
        weight 1, not the tangent Maya would evaluate.
        """
        x_attr, y_attr = ('kix', 'kiy') if in_tangent else ('kox', 'koy')
        x = self._key_attr(x_attr, index, None)
        y = self._key_attr(y_attr, index, None)
        if x is None or y is None:
            return 0.0, 1.0
        return math.degrees(math.atan2(y, x)), math.hypot(x, y)


class MayaScene:
    """Container for parsed Maya scene data"""

    def __init__(self):
        self.nodes: Dict[str, MayaNode] = {}
        self.anim_curves: Dict[str, MayaAnimCurve] = {}
        self.connections: List[Tuple[str, str]] = []  # [(source, dest), ...]
        self.connected_plugs = set()  # {(node name, attribute long name)}
        self.curve_bindings: List[Tuple[str, str, MayaAnimCurve]] = []
        self.fps: float = 24.0
        self.linear_unit: str = 'cm'
        self.angular_unit: str = 'deg'

    def get_node(self, name: str) -> Optional[MayaNode]:
        return self.nodes.get(name)

    def get_transforms(self) -> List[MayaNode]:
        return [n for n in self.nodes.values() if n.node_type in TRANSFORM_NODE_TYPES]

    def angles_in_degrees(self) -> bool:
        return self.angular_unit in ANGULAR_DEGREE_UNITS


class MayaASCIIParser:
    """Pure Python parser for Maya ASCII (.ma) file format"""

    def __init__(self):
        self.scene = MayaScene()
        self._current_node: Optional[MayaNode] = None
        self._current_curve: Optional[MayaAnimCurve] = None

    def parse(self, file_path: str) -> MayaScene:
        """Parse a Maya ASCII file and return structured scene data

        Raises:
            SceneReadError: If the file cannot be read
        """
        try:
            with open(file_path, 'r', encoding='utf-8', errors='replace') as f:
                content = f.read()
        except OSError as e:
            raise SceneReadError(f"Cannot read Maya ASCII file {file_path}: {e}")
        return self.parse_text(content)

    def parse_text(self, content: str) -> MayaScene:
        """Parse Maya ASCII content already loaded as text"""
        self.scene = MayaScene()
        self._current_node = None
        self._current_curve = None

        # Process line by line, handling line continuations
        lines = self._preprocess_lines(content)

        for line in lines:
            line = line.strip()
            if not line or line.startswith('//'):
                continue

            if line.startswith('createNode '):
                self._parse_create_node(line)
            elif line.startswith('setAttr '):
                self._parse_set_attr(line)
            elif line.startswith('addAttr '):
                self._parse_add_attr(line)
            elif line.startswith('connectAttr '):
                self._parse_connect_attr(line)
            elif line.startswith('currentUnit '):
                self._parse_current_unit(line)
            elif line.startswith('select '):
                # setAttr after select targets the selected node, not ours
                self._current_node = None
                self._current_curve = None

        self._build_hierarchy()
        self._link_animations()

        return self.scene

    def _preprocess_lines(self, content: str) -> List[str]:
        """Preprocess content to handle multi-line statements"""
        lines = []
        current_line = ""

        for line in content.split('\n'):
            stripped = line.strip()

            # Skip empty lines and comments when not accumulating
            if not current_line and (not stripped or stripped.startswith('//')):
                continue

            current_line += " " + stripped if current_line else stripped

            # Check if statement is complete (ends with semicolon)
            if current_line.rstrip().endswith(';'):
                lines.append(current_line)
                current_line = ""

        return lines

    def _parse_create_node(self, line: str):
        """Parse createNode command: createNode type -n "name" [-p "parent"] [-s];"""
        match = re.match(r'createNode\s+(\w+)', line)
        if not match:
            return
        node_type = match.group(1)

        name_match = re.search(r'-n\s+"([^"]+)"', line)
        if not name_match:
            name_match = re.search(r"-n\s+'([^']+)'", line)
        name = name_match.group(1) if name_match else f"unnamed_{len(self.scene.nodes)}"

        parent_match = re.search(r'-p\s+"([^"]+)"', line)
        if not parent_match:
            parent_match = re.search(r"-p\s+'([^']+)'", line)
        parent_name = _node_name(parent_match.group(1)) if parent_match else None

        shared = re.search(r'\s-s(?=[\s;])', line) is not None

        if node_type.startswith('animCurve'):
            curve_type = node_type[9:]  # Extract TL, TA, TU, etc.
            curve = MayaAnimCurve(name, curve_type)
            self.scene.anim_curves[name] = curve
            self._current_curve = curve
            self._current_node = None
        else:
            node = MayaNode(name, node_type, parent_name, shared)
            self.scene.nodes[name] = node
            self._current_node = node
            self._current_curve = None

    def _split_set_attr(self, line: str) -> Optional[Tuple[str, List[str], str]]:
        """Split a setAttr statement into attribute spec, value tokens and flags

        setAttr -k off ".v" no;  ->  ("v", ["no"], "setAttr -k off ")
        """
        attr_match = re.search(r'"\.([^"]+)"', line)
        if not attr_match:
            attr_match = re.search(r"'\.([^']+)'", line)
        if not attr_match:
            return None

        values_str = line[attr_match.end():].rstrip(';').strip()
        values_str = re.sub(r'-type\s+["\']?\w+["\']?', '', values_str)
        return attr_match.group(1), values_str.split(), line[:attr_match.start()]

    def _parse_set_attr(self, line: str):
        """Parse setAttr command for the current node or curve"""
        if self._current_curve:
            self._parse_anim_curve_attr(line)
        elif self._current_node:
            self._parse_node_attr(line)

    def _parse_anim_curve_attr(self, line: str):
        """Parse animation curve attributes (keyframes, tangents, infinity)"""
        curve = self._current_curve
        split = self._split_set_attr(line)
        if not split:
            return
        attr_spec, tokens, _ = split

        index_match = re.match(r'(\w+)\[(\d+)(?::\d+)?\]$', attr_spec)
        attr = index_match.group(1) if index_match else attr_spec
        attr = CURVE_ATTR_ALIASES.get(attr, attr)

        if not index_match:
            if not tokens:
                return
            if attr == 'wgt':
                curve.weighted = bool(_parse_token(tokens[0]))
            elif attr == 'pre':
                curve.pre = int(_parse_token(tokens[0]))
            elif attr == 'pst':
                curve.pst = int(_parse_token(tokens[0]))
            return

        start = int(index_match.group(2))

        # Pairs of (frame, value): setAttr -s N ".ktv[0:N]" frame1 value1 ...
        if attr == 'ktv':
            numbers = re.findall(NUMBER_PATTERN, ' '.join(tokens))
            pairs = [(float(numbers[i]), float(numbers[i + 1]))
                     for i in range(0, len(numbers) - 1, 2)]
            del curve.keyframes[start:]
            curve.keyframes.extend(pairs)
            return

        values = curve.key_attrs.setdefault(attr, {})
        for offset, token in enumerate(tokens):
            values[start + offset] = _parse_token(token)

    def _parse_node_attr(self, line: str):
        """Parse node attribute values and keyable state"""
        node = self._current_node
        split = self._split_set_attr(line)
        if not split:
            return
        attr_spec, tokens, flags = split

        # Array and nested plugs carry no exportable state here
        if '[' in attr_spec or '.' in attr_spec:
            return

        keyable = _parse_flag_bool(flags, '-k')

        if attr_spec in COMPOUND_ATTRIBUTES:
            targets = [node.get_attribute(n) for n in COMPOUND_ATTRIBUTES[attr_spec]]
            targets = [t for t in targets if t is not None]
            for attribute in targets:
                if keyable is not None:
                    attribute.keyable = keyable
            if len(tokens) >= len(targets):
                for attribute, token in zip(targets, tokens):
                    self._assign_value(attribute, token)
            return

        attribute = node.get_attribute(attr_spec)
        if attribute is None:
            return
        if keyable is not None:
            attribute.keyable = keyable
        if tokens:
            self._assign_value(attribute, tokens[0])

    def _assign_value(self, attribute: MayaAttribute, token: str):
        """Store a file value on an attribute, angles as radians"""
        try:
            value = _parse_token(token)
        except ValueError:
            return
        attribute.value = self._to_host_value(attribute, value)

    def _to_host_value(self, attribute: MayaAttribute, value: Any) -> Any:
        if attribute.attribute_type == AttributeType.DOUBLE_ANGLE and self.scene.angles_in_degrees():
            return degrees_to_radians(value)
        if attribute.numeric_type == NumericType.BOOLEAN:
            return bool(value)
        return value

    def _parse_add_attr(self, line: str):
        """Parse addAttr: addAttr -ci true -k true -sn "foo" -ln "foo" -at "double" -dv 1;"""
        node = self._current_node
        if not node:
            return

        long_match = re.search(r'-ln\s+"([^"]+)"', line)
        if not long_match:
            return
        long_name = long_match.group(1)
        short_match = re.search(r'-sn\s+"([^"]+)"', line)
        short_name = short_match.group(1) if short_match else long_name

        type_match = re.search(r'-at\s+"([^"]+)"', line)
        attr_type, num_type = ADD_ATTR_TYPES.get(
            type_match.group(1) if type_match else '',
            (AttributeType.OTHER, NumericType.OTHER)
        )

        keyable = bool(_parse_flag_bool(line, '-k'))

        attribute = MayaAttribute(long_name, short_name, attr_type, num_type,
                                  False if num_type == NumericType.BOOLEAN else 0.0, keyable)
        dv_match = re.search(r'-dv\s+(' + NUMBER_PATTERN + r')', line)
        if dv_match:
            attribute.value = self._to_host_value(attribute, float(dv_match.group(1)))
        node.add_attribute(attribute)

    def _parse_connect_attr(self, line: str):
        """Parse connectAttr command: connectAttr "source.attr" "dest.attr";"""
        match = re.search(r'connectAttr\s+(?:-\w+\s+)*"([^"]+)"\s+"([^"]+)"', line)
        if not match:
            match = re.search(r"connectAttr\s+(?:-\w+\s+)*'([^']+)'\s+'([^']+)'", line)
        if match:
            self.scene.connections.append((match.group(1), match.group(2)))

    def _parse_current_unit(self, line: str):
        """Parse currentUnit command for units"""
        # currentUnit -l centimeter -a degree -t film;
        linear_match = re.search(r'-l\s+(\w+)', line)
        if linear_match:
            self.scene.linear_unit = linear_match.group(1)

        angular_match = re.search(r'-a\s+(\w+)', line)
        if angular_match:
            self.scene.angular_unit = angular_match.group(1)

        time_match = re.search(r'-t\s+([\w.]+)', line)
        if time_match:
            time_unit = time_match.group(1)
            # Convert time unit to FPS
            fps_map = {
                'game': 15.0, 'film': 24.0, 'pal': 25.0, 'ntsc': 30.0,
                'show': 48.0, 'palf': 50.0, 'ntscf': 60.0,
                '23.976fps': 23.976, '29.97fps': 29.97, '29.97df': 29.97,
                '47.952fps': 47.952, '59.94fps': 59.94,
            }
            fps_match = re.match(r'(\d+)fps$', time_unit)
            if time_unit in fps_map:
                self.scene.fps = fps_map[time_unit]
            elif fps_match:
                self.scene.fps = float(fps_match.group(1))
            else:
                self.scene.fps = 24.0

    def _build_hierarchy(self):
        """Build parent-child relationships between nodes"""
        for node in self.scene.nodes.values():
            if node.parent_name and node.parent_name in self.scene.nodes:
                parent = self.scene.nodes[node.parent_name]
                node._parent = parent
                parent.children.append(node)

    def _link_animations(self):
        """Record connected plugs and link animation curves to their targets"""
        degrees = self.scene.angles_in_degrees()
        for curve in self.scene.anim_curves.values():
            curve.fps = self.scene.fps
            curve.angles_in_degrees = degrees

        for source, dest in self.scene.connections:
            # Destination: "pCube1.translateX" or "|grp|pCube1.tx"
            dest_parts = dest.split('.')
            if len(dest_parts) < 2:
                continue
            node_name = _node_name(dest_parts[0])
            attr_name = dest_parts[1]
            node = self.scene.get_node(node_name)
            if node is not None:
                attribute = node.get_attribute(attr_name)
                if attribute is not None:
                    attr_name = attribute.long_name
            self.scene.connected_plugs.add((node_name, attr_name))
            # "pCube1.t" drives every child channel
            for child in COMPOUND_ATTRIBUTES.get(attr_name, ()):
                self.scene.connected_plugs.add((node_name, child))

            # Source: "pCube1_translateX.output" or "pCube1_translateX.o"
            curve = self.scene.anim_curves.get(_node_name(source.split('.')[0]))
            if curve is not None:
                self.scene.curve_bindings.append((node_name, attr_name, curve))


class MayaReader(BaseReader):
    """Maya ASCII reader implementing BaseReader interface

    Parses .ma files without requiring Maya installation.
    Supports:
    - Built-in transform channels (visibility, translate, rotate, scale)
    - Dynamic attributes declared with addAttr
    - animCurve nodes with tangents, locks, breakdowns and infinity
    - Connections (connected plugs are reported as such)
    """

    def __init__(self, ma_file: str, selection: Optional[List[str]] = None):
        """Initialize reader and parse Maya ASCII file

        Args:
            ma_file: Path to Maya ASCII (.ma) file
            selection: Node names to select, in order. Defaults to every
                       non-shared transform in file order.

        Raises:
            SceneReadError: If the file cannot be read or a selected node is missing
        """
        super().__init__(ma_file)
        parser = MayaASCIIParser()
        self.scene = parser.parse(str(self.file_path))

        if selection is None:
            self.selection = [n for n in self.scene.get_transforms() if not n.shared]
        else:
            self.selection = []
            for name in selection:
                node = self.scene.get_node(_node_name(name))
                if node is None:
                    raise SceneReadError(f"Node not found in {self.file_path.name}: {name}")
                self.selection.append(node)

    def get_format_name(self) -> str:
        return "Maya ASCII"

    def get_selection(self) -> List[MayaNode]:
        return list(self.selection)

    def get_full_path(self, obj: MayaNode) -> str:
        return obj.get_full_path()

    def list_plugs(self, obj: MayaNode) -> List[MayaAttribute]:
        return list(obj.attributes.values())

    def plug_name(self, plug: Any) -> str:
        if isinstance(plug, str):
            return plug
        return f"{plug.node.name}.{plug.long_name}"

    def is_connected(self, plug: MayaAttribute) -> bool:
        return (plug.node.name, plug.long_name) in self.scene.connected_plugs

    def is_keyable(self, plug: MayaAttribute) -> bool:
        return plug.keyable

    def attribute_type(self, plug: MayaAttribute) -> AttributeType:
        return plug.attribute_type

    def numeric_type(self, plug: MayaAttribute) -> NumericType:
        return plug.numeric_type

    def get_value(self, plug: MayaAttribute) -> Any:
        return plug.value

    def is_animated(self, obj: MayaNode) -> bool:
        return any(node_name == obj.name for node_name, _, _ in self.scene.curve_bindings)

    def find_animated_plugs(self, obj: MayaNode) -> List[Tuple[Any, MayaAnimCurve]]:
        """Get (plug, curve) bindings in connection order

        Curves driving attributes the node does not declare are reported
        with the dotted plug name as the plug handle.
        """
        bindings = []
        for node_name, attr_name, curve in self.scene.curve_bindings:
            if node_name != obj.name:
                continue
            attribute = obj.attributes.get(attr_name)
            bindings.append((attribute if attribute is not None else f"{obj.name}.{attr_name}", curve))
        return bindings
