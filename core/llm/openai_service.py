"""
OpenAI Service - LLM implementation using the OpenAI API.

Provides schema-constrained completions against OpenAI or any
OpenAI-compatible endpoint (set base_url).
"""
from typing import Dict, Any, Optional, Tuple
import copy
import json
import logging

from openai import AsyncOpenAI

from core.llm.interfaces import LLMProvider

logger = logging.getLogger(__name__)


def _unwrap_schema_spec(spec: Dict[str, Any]) -> Tuple[str, bool, Dict[str, Any]]:
    """Unwrap a schema spec to extract name, strict flag, and raw JSON schema.

    Args:
        spec: Either a wrapped spec {'name': str, 'strict': bool, 'schema': {...}}
              or a raw JSON schema dict

    Returns:
        Tuple of (name, strict, raw_schema)
    """
    if isinstance(spec, dict) and "schema" in spec and "name" in spec:
        return spec.get("name", "structured_response"), bool(spec.get("strict", False)), spec["schema"]
    return "structured_response", False, spec


class OpenAIService(LLMProvider):
    """
    OpenAI LLM Service.

    Requests are made once: the client is built with max_retries=0 so a
    failed call surfaces immediately and the caller decides what to do.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: str = "gpt-4o-mini",
        temperature: float = 0.3,
        max_tokens: int = 500,
        timeout_seconds: float = 30.0,
        client: Optional[AsyncOpenAI] = None
    ):
        if client is None:
            client_kwargs: Dict[str, Any] = {"max_retries": 0, "timeout": timeout_seconds}
            if api_key:
                client_kwargs['api_key'] = api_key
            if base_url:
                client_kwargs['base_url'] = base_url
            client = AsyncOpenAI(**client_kwargs)

        self.client = client
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    async def complete_structured(
        self,
        system_prompt: str,
        user_message: str,
        schema_spec: Dict[str, Any]
    ) -> Dict[str, Any]:
        """Run a JSON Schema mode completion and return the decoded object.

        Raises:
            ValueError: schema_spec is not an object schema, or the response is empty or not a JSON object
            json.JSONDecodeError: the response content is not valid JSON
            openai.OpenAIError: transport or API failure
        """
        name, strict, raw_schema = _unwrap_schema_spec(schema_spec)
        runtime_schema = copy.deepcopy(raw_schema)

        if runtime_schema.get("type") != "object" or "properties" not in runtime_schema:
            raise ValueError(f"Not a valid JSON Schema object. Top-level keys: {list(runtime_schema.keys())}")

        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_message},
        ]

        response = await self.client.chat.completions.create(
            model=self.model,
            messages=messages,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            response_format={
                "type": "json_schema",
                "json_schema": {
                    "name": name,
                    "schema": runtime_schema,
                    "strict": strict,
                },
            },
        )

        try:
            content = response.choices[0].message.content
        except (IndexError, AttributeError) as e:
            logger.error(f"Malformed completion response: {e}")
            raise ValueError("Completion response has no message content") from e

        if not content:
            raise ValueError("Empty completion response")

        data = json.loads(content)
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object, got {type(data).__name__}")

        logger.debug("Structured completion (%s, schema=%s): %.200s", self.model, name, content)
        return data
