"""Example value synthesis for schema nodes.

Explicit ``example`` and ``default`` values are authoritative; anything
else is built from the node's shape. References are followed by name at
synthesis time. A schema node already being expanded on the current path
(through a ``$ref`` or a YAML alias) yields None instead of recursing, so
self-referential schemas terminate.
"""

import json
import logging
from datetime import datetime, timezone

from swag_docs.generator.content import negotiate
from swag_docs.parser.schema import properties_of, ref_name, resolve_ref, truthy
from swag_docs.parser.spec import SpecDocument

logger = logging.getLogger(__name__)

MAX_EXAMPLE_DEPTH = 32


def to_json(value) -> str:
    """Render a value as indented JSON text. Values JSON cannot encode fall back to str()."""
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)


def iso_timestamp(now: datetime) -> str:
    """ISO-8601 UTC timestamp with milliseconds and a 'Z' suffix."""
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc).replace(tzinfo=None)
    return now.isoformat(timespec="milliseconds") + "Z"


class ExampleBuilder:
    """Builds example values against one reference dictionary and one instant.

    ``active`` holds the ids of the schema nodes on the current recursion
    path; siblings may reuse the same node.
    """

    def __init__(self, definitions: dict | None = None, now: datetime | None = None):
        self.definitions = definitions if isinstance(definitions, dict) else {}
        self.now = now or datetime.now(timezone.utc)

    def _enter(self, node, active: frozenset, depth: int) -> frozenset | None:
        """Path set including ``node``, or None when the node closes a cycle."""
        if depth > MAX_EXAMPLE_DEPTH:
            return None
        if id(node) in active:
            logger.debug("Schema cycle at %s, example truncated", ref_name(node) or "inline node")
            return None
        return active | {id(node)}

    def value(self, node, active: frozenset = frozenset(), depth: int = 0):
        """Concrete example value for a schema node."""
        if not isinstance(node, dict):
            return None

        if "example" in node:
            return node["example"]
        if "default" in node:
            return node["default"]

        active = self._enter(node, active, depth)
        if active is None:
            return None

        target = resolve_ref(node, self.definitions)
        if target is not None:
            return self.value(target, active, depth + 1)

        props = node.get("properties")
        if isinstance(props, dict):
            return {key: self.value(sub, active, depth + 1) for key, sub in props.items()}

        declared = node.get("type")
        if declared == "string":
            timestamp = iso_timestamp(self.now)
            if node.get("format") == "date-time":
                return timestamp
            if node.get("format") == "date":
                return timestamp.split("T")[0]
            enum = node.get("enum")
            if isinstance(enum, list) and enum:
                return enum[0]
            return "string"
        if declared in ("number", "integer"):
            return 0
        if declared == "boolean":
            return False
        if declared == "array":
            items = node.get("items")
            if truthy(items):
                return [self.value(items, active, depth + 1)]
            return []
        if declared == "object":
            return {}
        return None

    def text(self, node, active: frozenset = frozenset(), depth: int = 0) -> str:
        """JSON text of a top-level example, or '' when nothing useful comes out."""
        if not isinstance(node, dict):
            return ""

        if node.get("example") is not None:
            return to_json(node["example"])

        inner = self._enter(node, active, depth)
        if inner is None:
            return ""

        target = resolve_ref(node, self.definitions)
        if target is not None:
            return self.text(target, inner, depth + 1)

        if isinstance(node.get("properties"), dict):
            return to_json({
                key: self.value(sub, inner, depth + 1)
                for key, sub in properties_of(node).items()
            })

        if node.get("type") == "array" and truthy(node.get("items")):
            return to_json([self.value(node["items"], inner, depth + 1)])

        if node.get("type") == "object":
            return to_json({})

        value = self.value(node, active, depth)
        return to_json(value) if value is not None else ""


def example_value(node, definitions: dict | None = None, now: datetime | None = None):
    return ExampleBuilder(definitions, now).value(node)


def example_text(node, definitions: dict | None = None, now: datetime | None = None) -> str:
    return ExampleBuilder(definitions, now).text(node)


def request_example(operation: dict, spec: SpecDocument, now: datetime | None = None) -> str:
    """Example JSON for an operation's modern request body, or ''."""
    negotiated = negotiate(spec.request_content(operation))
    if negotiated is None:
        return ""

    _, content = negotiated
    if not isinstance(content, dict):
        return ""
    if truthy(content.get("example")):
        return to_json(content["example"])
    if truthy(content.get("schema")):
        return example_text(content["schema"], spec.definitions, now)
    return ""
