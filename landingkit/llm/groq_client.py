# landingkit/llm/groq_client.py

"""Landing page copy from Groq's OpenAI-compatible chat completions API."""

from typing import Any

from landingkit.errors import ProviderError
from landingkit.llm.prompts import system_prompt, user_prompt
from landingkit.models.content import GenerationOptions
from landingkit.models.product import ProductCandidate
from landingkit.providers.base_provider import BaseProvider


class GroqCopywriter(BaseProvider):
    """Ask the model for copy and hand back its raw reply text.

    Parsing is left to :class:`~landingkit.content.normalizer.ContentNormalizer`;
    this class only moves text over the wire.
    """

    name = "groq"
    credential_setting = "GROQ_API_KEY"

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
    ) -> None:
        super().__init__(api_key)
        self.model = model or self.settings.GROQ_MODEL
        self.endpoint = self.settings.GROQ_ENDPOINT

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def build_payload(
        self, product: ProductCandidate, options: GenerationOptions
    ) -> dict[str, Any]:
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt(options)},
                {"role": "user", "content": user_prompt(product, options)},
            ],
            "temperature": self.settings.GROQ_TEMPERATURE,
            "max_tokens": self.settings.GROQ_MAX_TOKENS,
        }

    def generate(
        self, product: ProductCandidate, options: GenerationOptions
    ) -> str:
        """Return the model's reply for *product*.

        Raises:
            ProviderError: missing key, transport failure, non-2xx
                status or a response without message content.
        """
        api_key = self._require_key()
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key}",
        }
        self.logger.info(
            "Requesting copy for '%s' (model=%s, audience=%s, language=%s)",
            product.title,
            self.model,
            options.target_audience,
            options.language,
        )
        resp = self._fetch_post(
            self.endpoint,
            self.build_payload(product, options),
            headers=headers,
        )
        data = self._json(resp)

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as exc:
            raise ProviderError(self.name, "response has no message content") from exc
        if not isinstance(content, str):
            raise ProviderError(self.name, "message content is not text")

        usage = data.get("usage") or {}
        self.logger.debug(
            "Copy received: %d chars, %s tokens",
            len(content),
            usage.get("total_tokens", "?"),
        )
        return content
