"""
XML exporter - writes the animation document as indented XML

Layout:
    <Data>
        <object id="|pCube1">
            <visibility type="static" value="True" />
            <rotateX type="keyed">
                <infinity preInfinity="0" postInfinity="0" weightedTangents="False" />
                <key breakdown="0" inAngle="0.0" ... value="90.0" weightLock="False" />
            </rotateX>
        </object>
    </Data>

Attribute names that are not valid XML element names are written as
<attribute name="..."> so the name string is kept.
Characters that XML 1.0 forbids (most C0 controls) are dropped from
attribute values, ids and fallback names.
"""

import re
from xml.sax.saxutils import quoteattr

from exporters.base_exporter import BaseExporter
from core.anim_data import AttributeKind
from core.static_encoder import format_bool, format_real

XML_NAME_PATTERN = re.compile(r'^[A-Za-z_][A-Za-z0-9_.\-]*$')
# Characters outside the XML 1.0 Char production
INVALID_XML_CHARS = re.compile(
    "[^\u0009\u000A\u000D\u0020-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]"
)
FALLBACK_ELEMENT = "attribute"


def xml_text(value):
    """Drop characters an XML 1.0 document cannot contain"""
    return INVALID_XML_CHARS.sub("", value)


def is_xml_name(name):
    """True if name can be used as an element name"""
    return bool(XML_NAME_PATTERN.match(name)) and not name.lower().startswith('xml')


class XMLExporter(BaseExporter):
    """Streaming XML document writer"""

    def get_format_name(self):
        return "XML"

    def get_file_extension(self):
        return "xml"

    # === LOW LEVEL ===

    def _line(self, stream, depth, text):
        stream.write(f"{self.settings.indent * depth}{text}{self.settings.newline}")

    def _attrs(self, pairs):
        return " ".join(f"{name}={quoteattr(xml_text(value))}" for name, value in pairs)

    def _element(self, stream, depth, tag, pairs):
        self._line(stream, depth, f"<{tag} {self._attrs(pairs)} />")

    # === DOCUMENT ===

    def begin_document(self, stream):
        self._line(stream, 0, f'<?xml version="1.0" encoding={quoteattr(self.settings.encoding)}?>')
        self._line(stream, 0, f"<{self.settings.root_tag}>")

    def end_document(self, stream):
        self._line(stream, 0, f"</{self.settings.root_tag}>")

    def write_object(self, stream, node):
        """Write an object element with all of its attribute elements"""
        attributes = node.attributes
        if not attributes:
            self._element(stream, 1, "object", [("id", node.path)])
            return

        self._line(stream, 1, f"<object {self._attrs([('id', node.path)])}>")
        for attribute in attributes:
            self._write_attribute(stream, attribute)
        self._line(stream, 1, "</object>")

    def _write_attribute(self, stream, attribute):
        if is_xml_name(attribute.name):
            tag, pairs = attribute.name, []
        else:
            tag, pairs = FALLBACK_ELEMENT, [("name", attribute.name)]

        if attribute.kind == AttributeKind.STATIC:
            pairs += [("type", "static"), ("value", attribute.value)]
            self._element(stream, 2, tag, pairs)
            return

        pairs.append(("type", "keyed"))
        self._line(stream, 2, f"<{tag} {self._attrs(pairs)}>")
        self._write_curve(stream, attribute.curve)
        self._line(stream, 2, f"</{tag}>")

    def _write_curve(self, stream, curve):
        infinity = curve.infinity
        self._element(stream, 3, "infinity", [
            ("preInfinity", str(infinity.pre_infinity)),
            ("postInfinity", str(infinity.post_infinity)),
            ("weightedTangents", format_bool(infinity.weighted_tangents)),
        ])

        for key in curve.keys:
            self._element(stream, 3, "key", [
                ("breakdown", str(key.breakdown)),
                ("inAngle", format_real(key.in_angle)),
                ("inTangentType", key.in_tangent_type),
                ("inWeight", format_real(key.in_weight)),
                ("key", format_real(key.time)),
                ("lock", format_bool(key.tangents_locked)),
                ("outAngle", format_real(key.out_angle)),
                ("outTangentType", key.out_tangent_type),
                ("outWeight", format_real(key.out_weight)),
                ("value", format_real(key.value)),
                ("weightLock", format_bool(key.weights_locked)),
            ])
