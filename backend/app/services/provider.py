from typing import Optional
import requests
from ..core.config import Settings


class ProviderError(Exception):
    """The completion service could not be reached or sent an unusable reply."""


class CompletionProvider:
    name = "base"
    timeout = 30.0

    def complete(self, system: str, prompt: str) -> str:
        raise NotImplementedError

    def _post(self, url: str, payload: dict, headers: Optional[dict] = None) -> dict:
        try:
            r = requests.post(url, json=payload, headers=headers, timeout=self.timeout)
            r.raise_for_status()
            return r.json()
        except (requests.RequestException, ValueError) as e:
            raise ProviderError(f"{self.name} request failed: {e}") from e


class OpenAIProvider(CompletionProvider):
    name = "openai"

    def __init__(self, api_key: str, model: str = "gpt-3.5-turbo",
                 base_url: str = "https://api.openai.com/v1", timeout: float = 30.0,
                 temperature: float = 0.3, max_tokens: int = 1000):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.temperature = temperature
        self.max_tokens = max_tokens

    def complete(self, system: str, prompt: str) -> str:
        data = self._post(
            f"{self.base_url}/chat/completions",
            {
                "model": self.model,
                "messages": [
                    {"role": "system", "content": system},
                    {"role": "user", "content": prompt},
                ],
                "temperature": self.temperature,
                "max_tokens": self.max_tokens,
            },
            headers={"Authorization": f"Bearer {self.api_key}"},
        )
        try:
            content = data["choices"][0]["message"]["content"] or ""
        except (KeyError, IndexError, TypeError) as e:
            raise ProviderError(f"openai reply has no message content: {e}") from e
        if not isinstance(content, str):
            raise ProviderError("openai message content is not text")
        return content


class OllamaProvider(CompletionProvider):
    name = "ollama"

    def __init__(self, host: str, model: str = "gemma:2b", timeout: float = 30.0):
        self.host = host.rstrip("/")
        self.model = model
        self.timeout = timeout

    def complete(self, system: str, prompt: str) -> str:
        data = self._post(
            f"{self.host}/api/generate",
            {"model": self.model, "system": system, "prompt": prompt, "stream": False},
        )
        if not isinstance(data, dict):
            raise ProviderError("ollama reply is not an object")
        response = data.get("response") or ""
        if not isinstance(response, str):
            raise ProviderError("ollama response is not text")
        return response


def get_provider(settings: Settings) -> Optional[CompletionProvider]:
    """Provider selected by LLM_PROVIDER, or None when the model path is off."""
    provider = settings.LLM_PROVIDER.lower()
    if provider == "openai" and settings.OPENAI_API_KEY:
        return OpenAIProvider(
            api_key=settings.OPENAI_API_KEY,
            model=settings.OPENAI_MODEL,
            base_url=settings.OPENAI_BASE_URL,
            timeout=settings.LLM_TIMEOUT,
            temperature=settings.LLM_TEMPERATURE,
            max_tokens=settings.LLM_MAX_TOKENS,
        )
    if provider == "ollama" and settings.OLLAMA_HOST:
        return OllamaProvider(
            host=settings.OLLAMA_HOST,
            model=settings.OLLAMA_MODEL,
            timeout=settings.LLM_TIMEOUT,
        )
    return None
