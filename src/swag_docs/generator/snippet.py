"""Axios call snippet for one operation."""

from swag_docs.parser.schema import truthy

BODY_METHODS = ("post", "put", "patch")


def _params_in(operation: dict, location: str) -> list[dict]:
    params = operation.get("parameters") or []
    return [p for p in params if isinstance(p, dict) and p.get("in") == location]


def axios_snippet(method: str, path: str, operation: dict) -> str:
    """Render ``axios.<method>(url[, data][, { params }])`` for an operation."""
    method_lower = method.lower()
    path_params = _params_in(operation, "path")
    query_params = _params_in(operation, "query")
    body_params = _params_in(operation, "body")

    has_body = (truthy(operation.get("requestBody")) or bool(body_params)) and method_lower in BODY_METHODS

    url = path
    for param in path_params:
        name = param.get("name", "")
        url = url.replace(f"{{{name}}}", f"${{{name}}}", 1)
    url = f"`{url}`" if path_params else f"'{url}'"

    args = [url]
    if has_body:
        args.append("data")
    if query_params:
        args.append("{ params }")

    return f"axios.{method_lower}({', '.join(args)})"
