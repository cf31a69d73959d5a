"""Load an API description document and detect its dialect."""

import json
import logging
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

OPENAPI = "openapi"
SWAGGER = "swagger"


class SpecLoadError(ValueError):
    """Raised when a file does not hold an OpenAPI or Swagger document."""


def detect_dialect(doc: dict) -> str | None:
    """Return 'openapi', 'swagger', or None when neither version tag is present."""
    if not isinstance(doc, dict):
        return None
    if OPENAPI in doc:
        return OPENAPI
    if SWAGGER in doc:
        return SWAGGER
    return None


def load_document(file_path: Path) -> dict:
    """Read a YAML or JSON file and return the parsed specification."""
    text = file_path.read_text(encoding="utf-8")

    data = None
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        logger.debug("YAML parse failed for %s: %s", file_path, e)
        # Try JSON specifically (for files not parseable as YAML)
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, ValueError):
            raise SpecLoadError(f"{file_path} is neither valid YAML nor JSON") from e

    if not isinstance(data, dict):
        raise SpecLoadError(f"{file_path} does not contain a mapping at the top level")

    dialect = detect_dialect(data)
    if dialect is None:
        raise SpecLoadError(f"{file_path} has no 'openapi' or 'swagger' version tag")

    logger.debug("Loaded %s document from %s", dialect, file_path)
    return data
