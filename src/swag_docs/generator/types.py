"""TypeScript type synthesis for schema nodes and response type naming."""

import json

from swag_docs.parser.schema import (
    SchemaKind,
    classify,
    properties_of,
    ref_name,
    required_of,
    truthy,
)

MAX_DEPTH = 5
ANY = "any"


def to_type(node, definitions: dict | None = None, depth: int = 0) -> str:
    """Render a schema node as a TypeScript type expression.

    Recursion stops past MAX_DEPTH and yields ``any``. References are not
    followed, only named, so self-referential schemas terminate.
    """
    if depth > MAX_DEPTH:
        return ANY

    kind = classify(node)

    if kind is SchemaKind.STRING:
        enum = node.get("enum")
        if isinstance(enum, list):
            return " | ".join(f'"{_literal(v)}"' for v in enum)
        return "string"

    if kind is SchemaKind.NUMBER:
        return "number"

    if kind is SchemaKind.BOOLEAN:
        return "boolean"

    if kind is SchemaKind.ARRAY:
        items = node.get("items")
        item_type = to_type(items, definitions, depth + 1) if truthy(items) else ANY
        return f"{item_type}[]"

    if kind is SchemaKind.ALL_OF:
        return " & ".join(to_type(s, definitions, depth + 1) for s in node["allOf"])

    if kind is SchemaKind.ONE_OF:
        return "(" + " | ".join(to_type(s, definitions, depth + 1) for s in node["oneOf"]) + ")"

    if kind is SchemaKind.REF:
        # Unresolved names are kept as-is; the caller defines or accepts them.
        return ref_name(node) or ANY

    if kind is SchemaKind.OBJECT:
        required = required_of(node)
        lines = []
        for key, value in properties_of(node).items():
            optional = "" if key in required else "?"
            lines.append(f"  {key}{optional}: {to_type(value, definitions, depth + 1)};")
        return "{\n" + "\n".join(lines) + "\n}"

    return ANY


def _literal(value) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, default=str)


def type_name(path: str, method: str) -> str:
    """Deterministic response type name, e.g. ('/users/{id}', 'get') -> 'GetUsersIdResponse'."""
    prefix = method[:1].upper() + method[1:].lower()
    parts = [
        part[:1].upper() + part[1:]
        for part in path.replace("{", "").replace("}", "").split("/")
        if part
    ]
    return f"{prefix}{''.join(parts)}Response"


def response_declaration(name: str, ts_type: str) -> str:
    """Declare a synthesized type as an interface (structural records) or a type alias."""
    if "{\n" in ts_type:
        return f"interface {name} {ts_type}"
    return f"type {name} = {ts_type}"
