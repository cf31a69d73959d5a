"""Schema node shape classification.

Schema nodes stay raw mappings. The decision "what shape is this node" is
made here once, so the recursive generators only dispatch on the result.
"""

from enum import Enum


class SchemaKind(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    ALL_OF = "allOf"
    ONE_OF = "oneOf"
    REF = "ref"
    OBJECT = "object"
    OPAQUE = "opaque"


def classify(node) -> SchemaKind:
    """Classify a node for type synthesis.

    A declared primitive or array type wins over composition keywords;
    an object (or untyped) node is checked for allOf, oneOf, $ref and
    properties in that order.
    """
    if not isinstance(node, dict):
        return SchemaKind.OPAQUE

    declared = node.get("type")
    if declared == "string":
        return SchemaKind.STRING
    if declared in ("number", "integer"):
        return SchemaKind.NUMBER
    if declared == "boolean":
        return SchemaKind.BOOLEAN
    if declared == "array":
        return SchemaKind.ARRAY

    if declared == "object" or not declared:
        if isinstance(node.get("allOf"), list):
            return SchemaKind.ALL_OF
        if isinstance(node.get("oneOf"), list):
            return SchemaKind.ONE_OF
        if node.get("$ref"):
            return SchemaKind.REF
        if isinstance(node.get("properties"), dict):
            return SchemaKind.OBJECT

    return SchemaKind.OPAQUE


def ref_name(node) -> str:
    """Bare name of a node's $ref (last path segment), or ''."""
    if not isinstance(node, dict):
        return ""
    ref = node.get("$ref")
    if not isinstance(ref, str):
        return ""
    return ref.split("/")[-1]


def resolve_ref(node, definitions: dict):
    """Target of a node's $ref in the reference dictionary, or None."""
    name = ref_name(node)
    if not name or not isinstance(definitions, dict):
        return None
    return definitions.get(name)


def properties_of(node) -> dict:
    if not isinstance(node, dict):
        return {}
    props = node.get("properties")
    return props if isinstance(props, dict) else {}


def required_of(node) -> list:
    if not isinstance(node, dict):
        return []
    required = node.get("required")
    return required if isinstance(required, list) else []


def truthy(value) -> bool:
    """Presence test for document values.

    Empty mappings and lists count as present ({} means "any schema");
    only null, false, zero and the empty string do not.
    """
    if isinstance(value, (dict, list)):
        return True
    return bool(value)
