"""Document assembler: renders the API reference for selected endpoints."""

import logging
from datetime import datetime

from swag_docs.generator.content import negotiate
from swag_docs.generator.examples import example_text, request_example, to_json
from swag_docs.generator.snippet import axios_snippet
from swag_docs.generator.types import response_declaration, to_type, type_name
from swag_docs.parser.base import Endpoint, Param
from swag_docs.parser.schema import truthy
from swag_docs.parser.spec import SpecDocument

logger = logging.getLogger(__name__)

SUCCESS_CODES = ("200", "201", "204")


def _fence(lang: str, body: str) -> str:
    return f"```{lang}\n{body}\n```\n\n"


def _parameters(operation: dict) -> list[dict]:
    return [p for p in operation.get("parameters") or [] if isinstance(p, dict)]


def _param_row(param: dict) -> Param:
    schema = param.get("schema") if isinstance(param.get("schema"), dict) else {}
    # Swagger 2 non-body parameters declare their type inline.
    param_type = schema.get("type") or param.get("type") or "string"
    return Param(
        name=str(param.get("name", "")),
        param_type=param_type if isinstance(param_type, str) else to_json(param_type),
        required=bool(param.get("required")),
        location=str(param.get("in", "")),
        description=str(param.get("description") or ""),
    )


def parameters_block(operation: dict) -> str:
    """JSON table of non-body parameters, or '' when there are none."""
    rows = [_param_row(p) for p in _parameters(operation) if p.get("in") != "body"]
    if not rows:
        return ""
    return to_json({row.name: row.model_dump(by_alias=True) for row in rows})


def body_example(operation: dict, spec: SpecDocument, now: datetime | None = None) -> str:
    """Request body example from requestBody, else from a Swagger 2 body parameter."""
    if truthy(operation.get("requestBody")):
        return request_example(operation, spec, now)
    body_param = next((p for p in _parameters(operation) if p.get("in") == "body"), None)
    if body_param and truthy(body_param.get("schema")):
        return example_text(body_param["schema"], spec.definitions, now)
    return ""


def _success_response(responses) -> dict | None:
    if not isinstance(responses, dict):
        return None
    for code in SUCCESS_CODES:
        # YAML loads unquoted status codes as integers.
        response = responses.get(code)
        if response is None:
            response = responses.get(int(code))
        if truthy(response):
            return response
    return None


def response_type(endpoint: Endpoint, spec: SpecDocument) -> str:
    """TypeScript declaration for the first success response, or ''."""
    response = _success_response(endpoint.operation.get("responses"))
    if not isinstance(response, dict):
        return ""

    negotiated = negotiate(spec.response_content(endpoint.operation, response))
    if negotiated is None:
        return ""
    _, content = negotiated
    if not isinstance(content, dict) or not truthy(content.get("schema")):
        return ""

    name = type_name(endpoint.path, endpoint.method)
    return response_declaration(name, to_type(content["schema"], spec.definitions))


def render_endpoint(endpoint: Endpoint, spec: SpecDocument, now: datetime | None = None) -> str:
    operation = endpoint.operation
    parts = [f"### {endpoint.method.upper()} {endpoint.path}\n\n"]

    if operation.get("summary"):
        parts.append(f"**Summary:** {operation['summary']}\n\n")

    if operation.get("description"):
        parts.append(f"{operation['description']}\n\n")

    params = parameters_block(operation)
    if params:
        parts.append("#### Parameters\n\n")
        parts.append(_fence("json", params))

    example = body_example(operation, spec, now)
    if example:
        parts.append("#### Request Body\n\n")
        parts.append(_fence("json", example))

    declaration = response_type(endpoint, spec)
    if declaration:
        parts.append("#### Response Type\n\n")
        parts.append(_fence("typescript", declaration))

    parts.append("#### Axios Example\n\n")
    parts.append(_fence("typescript", axios_snippet(endpoint.method, endpoint.path, operation)))

    parts.append("---\n\n")
    return "".join(parts)


def generate_markdown(
    doc: dict | SpecDocument,
    endpoints: list[Endpoint],
    prefix: str | None = None,
    now: datetime | None = None,
) -> str:
    """Assemble the reference text for endpoints, in the order given."""
    spec = doc if isinstance(doc, SpecDocument) else SpecDocument.from_raw(doc)

    parts = []
    if prefix:
        parts.append(f"{prefix}\n\n")

    parts.append("# API Documentation\n\n")

    if spec.is_openapi and spec.version is not None:
        parts.append(f"**OpenAPI Version:** {spec.version}\n\n")
    elif spec.is_swagger and spec.version is not None:
        parts.append(f"**Swagger Version:** {spec.version}\n\n")

    for endpoint in endpoints:
        parts.append(render_endpoint(endpoint, spec, now))

    logger.info("Rendered %d endpoints", len(endpoints))
    return "".join(parts)
