from typing import List, Optional

from openai import AsyncOpenAI

from support_assistant.core.config import settings
from support_assistant.core.exceptions import FallbackGenerationError
from support_assistant.core.logging import get_logger

logger = get_logger(__name__)


class LLMService:
    """Service for interacting with the OpenAI chat completion API."""

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.OPENAI_API_KEY
        self.model = model or settings.OPENAI_MODEL
        self.timeout = float(timeout if timeout is not None else settings.FALLBACK_TIMEOUT_SECONDS)
        self._client: Optional[AsyncOpenAI] = None

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self.api_key:
                raise FallbackGenerationError("OPENAI_API_KEY is not configured")
            self._client = AsyncOpenAI(api_key=self.api_key, timeout=self.timeout, max_retries=0)
        return self._client

    async def generate_chat_response(
        self,
        messages: List[dict],
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        model: Optional[str] = None,
    ) -> str:
        """Generate a chat response using the LLM."""
        try:
            response = await self.client.chat.completions.create(
                model=model or self.model,
                messages=messages,
                temperature=temperature,
                max_tokens=max_tokens
            )
            return response.choices[0].message.content
        except Exception as e:
            logger.error(f"Error generating chat response: {e}")
            raise

    async def complete(self, prompt: str) -> str:
        """Text-completion contract used by the generative fallback: prompt in, text out."""
        content = await self.generate_chat_response(
            [{"role": "user", "content": prompt}],
            temperature=float(settings.FALLBACK_TEMPERATURE),
            max_tokens=int(settings.FALLBACK_MAX_TOKENS),
        )
        if not isinstance(content, str) or not content.strip():
            raise FallbackGenerationError("empty completion payload")
        return content.strip()

# Singleton instance
llm_service = LLMService()
