"""OpenAI-backed analysis provider."""

from typing import Optional

from openai import AsyncOpenAI

from app.analysis.vendor import VendorAnalysisProvider
from app.logger import Logger


class OpenAIAnalysisProvider(VendorAnalysisProvider):
    """Analysis through the OpenAI chat completions API.

    Structured operations request ``response_format={"type": "json_object"}``.
    """

    vendor = "OpenAI"

    def __init__(
        self,
        api_key: str,
        model: str,
        timeout: Optional[float] = None,
        logger: Optional[Logger] = None,
        client: Optional[AsyncOpenAI] = None,
    ):
        super().__init__(model=model, logger=logger)
        if client is None:
            # No automatic retries
            options = {"api_key": api_key, "max_retries": 0}
            if timeout is not None:
                options["timeout"] = timeout
            client = AsyncOpenAI(**options)
        self._client = client

    async def _complete(
        self, system: str, prompt: str, max_tokens: int, json_mode: bool
    ) -> Optional[str]:
        kwargs = {}
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}
        response = await self._client.chat.completions.create(
            model=self.model,
            max_tokens=max_tokens,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": prompt},
            ],
            **kwargs,
        )
        if not response.choices:
            return None
        return response.choices[0].message.content
