"""Anthropic-backed analysis provider."""

from typing import Optional

from anthropic import AsyncAnthropic

from app.analysis.vendor import VendorAnalysisProvider
from app.logger import Logger


class AnthropicAnalysisProvider(VendorAnalysisProvider):
    """Analysis through the Anthropic messages API.

    The API has no JSON mode; replies are parsed as JSON, with or without a
    surrounding code fence.
    """

    vendor = "Anthropic"

    def __init__(
        self,
        api_key: str,
        model: str,
        timeout: Optional[float] = None,
        logger: Optional[Logger] = None,
        client: Optional[AsyncAnthropic] = None,
    ):
        super().__init__(model=model, logger=logger)
        if client is None:
            # No automatic retries
            options = {"api_key": api_key, "max_retries": 0}
            if timeout is not None:
                options["timeout"] = timeout
            client = AsyncAnthropic(**options)
        self._client = client

    async def _complete(
        self, system: str, prompt: str, max_tokens: int, json_mode: bool
    ) -> Optional[str]:
        response = await self._client.messages.create(
            model=self.model,
            max_tokens=max_tokens,
            system=system,
            messages=[{"role": "user", "content": prompt}],
        )
        if not response.content:
            return None
        block = response.content[0]
        if block.type != "text":
            raise ValueError("Resposta inválida do Anthropic")
        return block.text
