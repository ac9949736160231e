"""Model backends used by the math solving flow."""

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Dict, Optional, Union

from trackademic.common.http_utils import post_request
from trackademic.config import SolverConfig
from trackademic.errors import UpstreamError
from trackademic.logging import get_logger

# JSON text, or a mapping when the backend already decoded it
RawResponse = Union[str, Dict[str, Any]]

# anything awaitable taking the rendered prompt can serve as a backend
BackendCallable = Callable[[str], Awaitable[RawResponse]]


class ModelBackend(ABC):
    """Abstract generative model backend."""

    def __init__(self, name: Optional[str] = None):
        self.logger = get_logger(name or self.__class__.__name__)

    @abstractmethod
    async def generate(self, prompt: str) -> RawResponse:
        """Send `prompt` to the model and return its raw answer.

        Raises:
            UpstreamError: when the call itself fails.
        """
        pass

    async def __call__(self, prompt: str) -> RawResponse:
        return await self.generate(prompt)


class OpenRouterBackend(ModelBackend):
    """
    Backend for OpenRouter (or any OpenAI compatible chat completions API).

    The model is asked for a JSON object; the message content is returned
    as text and decoded by the caller.
    """

    def __init__(
        self,
        api_key: Optional[str],
        model: str,
        base_url: str = "https://openrouter.ai/api/v1/chat/completions",
        timeout: int = 60,
        temperature: float = 0.1,
        max_tokens: int = 1000,
    ):
        super().__init__()
        self.api_key = api_key
        self.model = model
        self.base_url = base_url
        self.timeout = timeout
        self.temperature = temperature
        self.max_tokens = max_tokens

    @classmethod
    def from_config(cls, config: SolverConfig) -> "OpenRouterBackend":
        return cls(
            api_key=config.api_key,
            model=config.model,
            base_url=config.base_url,
            timeout=config.timeout,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
        )

    async def generate(self, prompt: str) -> str:
        if not self.api_key:
            raise UpstreamError("No API key configured, set OPENROUTER_API_KEY")

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json"
        }
        data = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "response_format": {"type": "json_object"},
        }

        self.logger.info(f"Sending request to {self.model}")
        response = await post_request(self.base_url, headers, data, timeout=self.timeout)

        try:
            content = response["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            error = response.get("error") if isinstance(response, dict) else None
            message = error.get("message") if isinstance(error, dict) else str(response)[:200]
            self.logger.error(f"Malformed completion from {self.model}: {message}")
            raise UpstreamError(f"Malformed completion response: {message}") from e

        if not isinstance(content, str):
            self.logger.error(f"Unexpected completion content from {self.model}: {type(content).__name__}")
            raise UpstreamError(f"Completion content must be text, got {type(content).__name__}")
        return content.strip()


def create_backend(config: SolverConfig) -> ModelBackend:
    backends = {
        "openrouter": OpenRouterBackend,
    }
    return backends[config.backend].from_config(config)
