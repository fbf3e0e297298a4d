"""
AI contract generation - asks the OpenAI chat API for Solidity source and
then for a plain-English explanation of that source.
"""
import logging
from dataclasses import dataclass
from typing import Any, Optional

from openai import AsyncOpenAI

from ..core.config import Settings

logger = logging.getLogger(__name__)

CONTRACT_SYSTEM_PROMPT = """You are a Solidity smart contract expert. Generate a complete, production-ready Solidity smart contract based on the user's requirements.

Requirements:
- Use Solidity ^0.8.0 or higher
- Include proper SPDX license
- Add comprehensive NatSpec documentation
- Include error handling and access control where appropriate
- Make it gas-efficient
- Return ONLY the Solidity code, no explanations or markdown"""

EXPLANATION_SYSTEM_PROMPT = (
    "Explain this Solidity smart contract in simple, plain English. "
    "Focus on what the contract does, its main functions, and any important "
    "security considerations. Keep it concise and easy to understand."
)


class GeneratorNotConfiguredError(RuntimeError):
    """No OpenAI API key is configured."""


class GenerationError(RuntimeError):
    """The model provider failed or returned nothing usable."""


@dataclass
class GenerationResult:
    contract_source: str
    explanation: str
    prompt: str


class ContractGenerator:
    """Wraps the OpenAI client; the client is only built once a key is present."""

    def __init__(self, settings: Settings, client: Optional[Any] = None):
        self._api_key = settings.OPENAI_API_KEY
        self._model = settings.OPENAI_MODEL
        self._client = client

    @property
    def configured(self) -> bool:
        return self._client is not None or bool(self._api_key)

    @property
    def client(self) -> Any:
        if self._client is None:
            if not self._api_key:
                raise GeneratorNotConfiguredError("OpenAI API key not configured")
            self._client = AsyncOpenAI(api_key=self._api_key)
        return self._client

    async def _complete(self, system: str, user: str, temperature: float, max_tokens: int) -> str:
        completion = await self.client.chat.completions.create(
            model=self._model,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            temperature=temperature,
            max_tokens=max_tokens,
        )
        content = completion.choices[0].message.content
        if not content:
            raise GenerationError("Model returned an empty completion")
        return content

    async def generate(self, prompt: str) -> GenerationResult:
        """
        Generate a contract for the prompt, then explain it.

        Both calls run sequentially and are not retried. Any provider error is
        re-raised as GenerationError carrying the original message.
        """
        if not self.configured:
            raise GeneratorNotConfiguredError("OpenAI API key not configured")

        try:
            solidity_code = await self._complete(
                CONTRACT_SYSTEM_PROMPT, prompt, temperature=0.3, max_tokens=2000
            )
            explanation = await self._complete(
                EXPLANATION_SYSTEM_PROMPT, solidity_code, temperature=0.7, max_tokens=500
            )
        except GenerationError:
            raise
        except Exception as e:
            raise GenerationError(str(e)) from e

        return GenerationResult(
            contract_source=solidity_code,
            explanation=explanation,
            prompt=prompt,
        )
