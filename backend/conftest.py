from typing import Any, Callable, Dict, List, Optional, Tuple

import pytest

from copyspark.inference.base import ModelInvoker


class StubInvoker(ModelInvoker):
    """Records every call; replies with a fixed value or raises."""

    def __init__(self, reply: Any = None, error: Optional[BaseException] = None,
                 responder: Optional[Callable[[str], Any]] = None):
        self.reply = reply
        self.error = error
        self.responder = responder
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    async def invoke(self, prompt: str, output_schema: Dict[str, Any]) -> Any:
        self.calls.append((prompt, output_schema))
        if self.error is not None:
            raise self.error
        if self.responder is not None:
            return self.responder(prompt)
        return self.reply


@pytest.fixture
def stub_invoker():
    return StubInvoker


@pytest.fixture
def audience():
    return {"ageRange": "25-35", "gender": "All", "location": "USA", "interests": "fitness"}


@pytest.fixture
def ad_copy_payload(audience):
    return {
        "productName": "FlexBand Pro",
        "productDescription": "A resistance band set for home workouts.",
        "targetAudience": audience,
        "numberOfVariations": 3,
    }
