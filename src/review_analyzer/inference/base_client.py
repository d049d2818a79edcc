"""
Abstract base client for hosted inference.

Defines the interface that inference client implementations must adhere to,
so the classification backends can be tested against a fake and the hosted
provider can be swapped without touching normalization or the session layer.
"""

from abc import ABC, abstractmethod
from typing import Optional

import structlog

from review_analyzer.models.inference_models import InferenceRequest, InferenceResponse


logger = structlog.get_logger(__name__)


class BaseInferenceClient(ABC):
    """
    Abstract base class for hosted inference clients.

    Responsibilities:
    - Send inference requests with the bearer token
    - Map HTTP status codes to InferenceError subclasses
    - Parse the body into InferenceResponse (scores or generated text)

    Does NOT handle:
    - Prompt construction (that's PromptBuilder's job)
    - Label normalization (that's the normalizer's job)
    - Trying other models (that's BackendChain's job)
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        api_token: Optional[str] = None,
        **kwargs
    ):
        """
        Initialize base client.

        Args:
            base_url: Base URL of the inference provider
            timeout: Request timeout in seconds
            api_token: Default bearer token (per-call token overrides it)
            **kwargs: Additional provider-specific config
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.api_token = api_token
        self.extra_config = kwargs

        logger.info(
            "Initialized inference client",
            client_class=self.__class__.__name__,
            base_url=self.base_url,
            timeout=timeout,
            has_default_token=bool(api_token),
        )

    @abstractmethod
    async def generate(
        self, request: InferenceRequest, api_token: Optional[str] = None
    ) -> InferenceResponse:
        """
        Run one inference call.

        Args:
            request: Standardized inference request
            api_token: Token entered by the user for this call (optional)

        Returns:
            InferenceResponse with either scores or generated text

        Raises:
            InferenceConnectionError: Network/timeout errors
            InferenceStatusError: Mapped non-2xx status
            InferenceResponseShapeError: Unexpected body
            InferenceModelError: Model runtime reported an error
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """
        Check if the inference provider is reachable.

        Returns:
            True if reachable, False otherwise (never raises)
        """
        pass

    async def close(self):
        """Close client connections. Default implementation does nothing."""
        logger.debug("Closing inference client", client_class=self.__class__.__name__)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"base_url={self.base_url}, "
            f"timeout={self.timeout}s)"
        )
