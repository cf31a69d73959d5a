"""LLM hand-off for assembled API references, via litellm."""

import logging
import re

from litellm import completion

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-sonnet-4-20250514"


class LlmClient:
    """Sends an API reference with integration instructions to any litellm model."""

    def __init__(self, model: str | None = None):
        self.model = model or DEFAULT_MODEL

    def call(self, system: str, user: str) -> str:
        """Send a system+user message to the LLM and return the response text."""
        response = completion(
            model=self.model,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
        )
        return response.choices[0].message.content

    def integrate(self, reference: str, instructions: str) -> str:
        """Ask for integration code covering every endpoint in ``reference``.

        ``instructions`` is the system prompt; the reference Markdown goes
        in as the user message unchanged.
        """
        if not reference.strip():
            raise ValueError("API reference is empty")
        endpoints = len(re.findall(r"^### ", reference, re.MULTILINE))
        logger.info("Sending %d endpoints (%d chars) to %s", endpoints, len(reference), self.model)
        return self.call(system=instructions, user=reference)
