"""OpenAPI 3 / Swagger 2 document accessor.

Wraps a parsed document once so the generators see one shape for the
reference dictionary, request body content and response content,
whichever dialect the document is written in.
"""

from pydantic import BaseModel, Field

from .detect import OPENAPI, SWAGGER, detect_dialect

DEFAULT_MEDIA_TYPE = "application/json"


def _mapping(value) -> dict:
    return value if isinstance(value, dict) else {}


def _media_types(value) -> list[str]:
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, str)]


class SpecDocument(BaseModel):
    """A specification resolved to its dialect."""

    dialect: str | None = None
    version: str | None = None
    definitions: dict = Field(default_factory=dict)
    paths: dict = Field(default_factory=dict)
    produces: list[str] = Field(default_factory=list)

    @classmethod
    def from_raw(cls, doc: dict) -> "SpecDocument":
        doc = _mapping(doc)
        dialect = detect_dialect(doc)
        version = doc.get(dialect) if dialect else None
        return cls(
            dialect=dialect,
            version=None if version is None else str(version),
            definitions=resolve_definitions(doc),
            paths=_mapping(doc.get("paths")),
            produces=_media_types(doc.get("produces")),
        )

    @property
    def is_openapi(self) -> bool:
        return self.dialect == OPENAPI

    @property
    def is_swagger(self) -> bool:
        return self.dialect == SWAGGER

    def request_content(self, operation: dict) -> dict:
        """Content map of the operation's modern request body, or {}."""
        body = _mapping(operation.get("requestBody"))
        return _mapping(body.get("content"))

    def response_content(self, operation: dict, response: dict) -> dict:
        """Content map of a response.

        Swagger 2 responses carry a bare ``schema``; it is keyed by the
        operation's first ``produces`` entry, else the document's, else JSON.
        """
        response = _mapping(response)
        content = response.get("content")
        if isinstance(content, dict):
            return content
        if "schema" not in response:
            return {}

        produces = _media_types(operation.get("produces"))
        media_type = (produces or self.produces or [DEFAULT_MEDIA_TYPE])[0]
        entry = {"schema": response["schema"]}
        examples = _mapping(response.get("examples"))
        if media_type in examples:
            entry["example"] = examples[media_type]
        return {media_type: entry}


def resolve_definitions(doc: dict) -> dict:
    """Return the reference dictionary: components.schemas, else definitions, else {}."""
    doc = _mapping(doc)
    schemas = _mapping(doc.get("components")).get("schemas")
    if isinstance(schemas, dict):
        return schemas
    return _mapping(doc.get("definitions"))
