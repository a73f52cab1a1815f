"""
LLM collaborator: a thin wrapper over the Anthropic messages API plus the
JSON extraction every caller applies to the completion.
"""

import json
import logging
import re
from typing import Any, Dict, Optional

import anthropic

from .errors import LLMResponseError, LLMUnavailableError

logger = logging.getLogger(__name__)

# greedy: first "{" to last "}"
_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")


def extract_json(text: str) -> Dict[str, Any]:
    """Parse the JSON object embedded in a completion, prose around it allowed."""
    match = _JSON_OBJECT.search(text or "")
    if not match:
        raise LLMResponseError("The model did not return JSON")
    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise LLMResponseError(f"The model returned invalid JSON: {e.msg}") from e
    if not isinstance(parsed, dict):
        raise LLMResponseError("The model returned JSON that is not an object")
    return parsed


class LLMClient:
    """Sends single-turn prompts to Claude and returns the text reply."""

    def __init__(self, config: Dict[str, Any]):
        self.config = config
        self.model = config.get("model", "claude-sonnet-4-20250514")
        self._client = None

    @property
    def is_available(self) -> bool:
        return bool(self.config.get("api_key"))

    def _get_client(self):
        if self._client is None:
            if not self.is_available:
                raise LLMUnavailableError("ANTHROPIC_API_KEY is not configured")
            self._client = anthropic.Anthropic(
                api_key=self.config["api_key"],
                timeout=self.config.get("timeout", 60.0),
            )
            logger.info("Claude client initialized (model=%s)", self.model)
        return self._client

    def complete(self, prompt: str, max_tokens: Optional[int] = None) -> str:
        client = self._get_client()
        try:
            message = client.messages.create(
                model=self.model,
                max_tokens=max_tokens or self.config.get("max_tokens", 4096),
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.APIError as e:
            logger.error("Claude request failed: %s", e, exc_info=True)
            raise LLMResponseError("The language model request failed") from e

        parts = [block.text for block in message.content if getattr(block, "type", None) == "text"]
        return "".join(parts)

    def complete_json(self, prompt: str, max_tokens: Optional[int] = None) -> Dict[str, Any]:
        return extract_json(self.complete(prompt, max_tokens=max_tokens))
