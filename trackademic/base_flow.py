from abc import ABC, abstractmethod
from typing import Any, Optional

from trackademic.logging import get_logger


class Flow(ABC):
    """abstract base class for request/response flows."""

    def __init__(self, config: Any, name: Optional[str] = None):
        """initialize the flow.

        Args:
            config: Configuration specific to the flow (dict or pydantic model).
            name: Optional name for the flow (used for logging).
        """
        self.config = config
        if isinstance(config, dict):
            self.debug = config.get("debug", False)
        else:
            self.debug = getattr(config, "debug", False)
        self.logger = get_logger(name or self.__class__.__name__)

    @abstractmethod
    async def execute(self, input_data: Any) -> Any:
        """Execute the flow.

        Args:
            input_data: Input data to process.

        Returns:
            Result of the flow.
        """
        pass

    async def __call__(self, input_data: Any) -> Any:
        """shortway of calling `execute` method."""
        return await self.execute(input_data)
