"""
LLM Client
Thin wrapper around the OpenAI chat-completions API used for quiz analysis
"""
import logging
from typing import Optional

import openai

logger = logging.getLogger(__name__)


class LLMClientError(Exception):
    """Base exception for LLM client errors"""
    pass


class LLMTimeoutError(LLMClientError):
    """Raised when LLM request times out"""
    pass


class LLMAPIError(LLMClientError):
    """Raised when LLM API returns an error"""
    pass


SYSTEM_PROMPT = (
    "You are a professional psychologist providing personality analysis based on "
    "psychological assessment data. Provide accurate, insightful, and encouraging "
    "analysis while maintaining professional standards."
)

DEFAULT_MODEL = "gpt-4"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 2000
DEFAULT_TIMEOUT = 60.0  # seconds


class CompletionClient:
    """
    Sends a single prompt to the chat-completions endpoint.

    Retries are disabled: a failed call is reported to the caller, which
    decides whether to try again.
    """

    def __init__(
        self,
        api_key: Optional[str],
        model: str = DEFAULT_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        timeout: float = DEFAULT_TIMEOUT,
        system_prompt: str = SYSTEM_PROMPT,
    ):
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout
        self.system_prompt = system_prompt
        self._client: Optional[openai.AsyncOpenAI] = None

    @property
    def client(self) -> openai.AsyncOpenAI:
        if self._client is None:
            if not self.api_key:
                raise LLMClientError("OPENAI_API_KEY is not set")
            self._client = openai.AsyncOpenAI(
                api_key=self.api_key,
                timeout=self.timeout,
                max_retries=0,
            )
        return self._client

    async def complete(self, prompt: str) -> Optional[str]:
        """
        Return the raw text of the first choice.

        Returns None when the service answered without content.

        Raises:
            LLMTimeoutError: if the request exceeded the timeout
            LLMAPIError: if the API rejected the request or was unreachable
            LLMClientError: if no API key is configured or no response came back
        """
        logger.info(f"🤖 Requesting analysis from {self.model} (timeout: {self.timeout}s)")

        try:
            completion = await self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": self.system_prompt},
                    {"role": "user", "content": prompt},
                ],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except openai.APITimeoutError as e:
            logger.error(f"❌ OpenAI request timed out after {self.timeout}s")
            raise LLMTimeoutError(f"OpenAI request timed out: {e}") from e
        except openai.OpenAIError as e:
            logger.error(f"❌ OpenAI API error: {e}")
            raise LLMAPIError(f"OpenAI API error: {e}") from e

        if completion is None or not completion.choices:
            raise LLMClientError("OpenAI returned no response")

        content = completion.choices[0].message.content
        logger.info(f"✅ OpenAI response received ({len(content or '')} chars)")
        return content or None
