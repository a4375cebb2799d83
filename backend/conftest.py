import pytest

from researchai.inference import LLMClient


class FakeLLMClient(LLMClient):
    """Returns canned replies and records the messages it was sent."""

    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def generate(self, messages):
        self.calls.append(messages)
        if self.error:
            raise self.error
        return self.reply


@pytest.fixture
def fake_llm():
    def make(reply="", error=None):
        return FakeLLMClient(reply=reply, error=error)
    return make
