from abc import ABC, abstractmethod
from typing import Any, Dict


class ModelInvoker(ABC):
    @abstractmethod
    async def invoke(self, prompt: str, output_schema: Dict[str, Any]) -> Any:
        """
        Send a rendered prompt plus the expected output schema to a model.

        Returns the raw decoded reply. Raises InvocationError on any
        transport or service failure, timeout or unparseable reply.
        """
