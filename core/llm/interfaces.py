"""
LLM Provider Interface - Abstract base for completion service providers.

This module defines the interface for LLM services (OpenAI, Ollama, any
OpenAI-compatible endpoint).
"""
from abc import ABC, abstractmethod
from typing import Dict, Any


class LLMProvider(ABC):
    """
    Abstract Interface for AI Service Providers (OpenAI, Ollama, etc.).
    """

    @abstractmethod
    async def complete_structured(
        self,
        system_prompt: str,
        user_message: str,
        schema_spec: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Request a completion constrained to a JSON schema and return the parsed object.

        Args:
            system_prompt: Instruction message
            user_message: Content to analyze
            schema_spec: Either a wrapped spec {'name', 'strict', 'schema'} or raw JSON schema

        Raises any transport, timeout or parsing error to the caller.
        """
        pass
