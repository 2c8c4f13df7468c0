# Copyright (c) Microsoft. All rights reserved.

from collections.abc import AsyncIterable, MutableSequence
from typing import Any
from unittest.mock import AsyncMock, MagicMock

from agent_framework import (
    BaseChatClient,
    ChatMessage,
    ChatOptions,
    ChatResponse,
    ChatResponseUpdate,
    Role,
    TextContent,
    use_function_invocation,
)
from pytest import fixture


@fixture
def exclude_list(request: Any) -> list[str]:
    """Fixture that returns a list of environment variables to exclude."""
    return request.param if hasattr(request, "param") else []


@fixture
def override_env_param_dict(request: Any) -> dict[str, str]:
    """Fixture that returns a dict of environment variables to override."""
    return request.param if hasattr(request, "param") else {}


def _apply_env(monkeypatch: Any, env_vars: dict[str, str], exclude_list: list[str], overrides: dict[str, str]) -> None:
    env_vars.update(overrides)
    for key, value in env_vars.items():
        if key in exclude_list:
            monkeypatch.delenv(key, raising=False)
            continue
        monkeypatch.setenv(key, value)


@fixture()
def openai_unit_test_env(monkeypatch, exclude_list, override_env_param_dict):  # type: ignore
    """Fixture to set environment variables for OpenAISettings."""
    env_vars = {
        "OPENAI_API_KEY": "test-dummy-key",
        "OPENAI_ORG_ID": "test_org_id",
        "OPENAI_CHAT_MODEL_ID": "test_chat_model_id",
        "OPENAI_RESPONSES_MODEL_ID": "test_responses_model_id",
    }
    _apply_env(monkeypatch, env_vars, exclude_list or [], override_env_param_dict or {})
    return env_vars


@fixture()
def anthropic_unit_test_env(monkeypatch, exclude_list, override_env_param_dict):  # type: ignore
    """Fixture to set environment variables for AnthropicSettings."""
    env_vars = {
        "ANTHROPIC_API_KEY": "test-anthropic-api-key-12345",
        "ANTHROPIC_CHAT_MODEL_ID": "claude-3-5-sonnet-20241022",
    }
    _apply_env(monkeypatch, env_vars, exclude_list or [], override_env_param_dict or {})
    return env_vars


@fixture()
def azure_ai_unit_test_env(monkeypatch, exclude_list, override_env_param_dict):  # type: ignore
    """Fixture to set environment variables for AzureAISettings."""
    env_vars = {
        "AZURE_AI_PROJECT_ENDPOINT": "https://test-project.services.ai.azure.com/api/projects/test-project",
        "AZURE_AI_MODEL_DEPLOYMENT_NAME": "test-gpt-4o",
    }
    _apply_env(monkeypatch, env_vars, exclude_list or [], override_env_param_dict or {})
    return env_vars


@fixture()
def azure_openai_unit_test_env(monkeypatch, exclude_list, override_env_param_dict):  # type: ignore
    """Fixture to set environment variables for AzureOpenAISettings."""
    env_vars = {
        "AZURE_OPENAI_ENDPOINT": "https://test-endpoint.openai.azure.com",
        "AZURE_OPENAI_RESPONSES_DEPLOYMENT_NAME": "test_responses_deployment",
        "AZURE_OPENAI_API_KEY": "test_api_key",
    }
    _apply_env(monkeypatch, env_vars, exclude_list or [], override_env_param_dict or {})
    return env_vars


@fixture
def mock_project_client() -> MagicMock:
    """Fixture that provides a mock AIProjectClient."""
    mock_client = MagicMock()

    mock_client.agents = MagicMock()
    mock_client.agents.get = AsyncMock()
    mock_client.agents.create_version = AsyncMock()
    mock_client.agents.delete_version = AsyncMock()

    mock_client.get_openai_client = AsyncMock()
    mock_client.send_request = AsyncMock()
    mock_client.close = AsyncMock()

    return mock_client


@fixture
def mock_azure_credential() -> MagicMock:
    """Fixture that provides a mock AsyncTokenCredential."""
    return MagicMock()


@use_function_invocation
class MockChatClient(BaseChatClient):
    """A chat client that returns the queued responses and records the calls it receives."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.run_responses: list[ChatResponse] = []
        self.streaming_responses: list[list[ChatResponseUpdate]] = []
        self.calls: list[tuple[list[ChatMessage], ChatOptions]] = []

    async def _inner_get_response(
        self,
        *,
        messages: MutableSequence[ChatMessage],
        chat_options: ChatOptions,
        **kwargs: Any,
    ) -> ChatResponse:
        self.calls.append((list(messages), chat_options))
        if not self.run_responses:
            return ChatResponse(messages=ChatMessage(role=Role.ASSISTANT, text="test response"))
        return self.run_responses.pop(0)

    async def _inner_get_streaming_response(
        self,
        *,
        messages: MutableSequence[ChatMessage],
        chat_options: ChatOptions,
        **kwargs: Any,
    ) -> AsyncIterable[ChatResponseUpdate]:
        self.calls.append((list(messages), chat_options))
        if not self.streaming_responses:
            yield ChatResponseUpdate(role=Role.ASSISTANT, contents=[TextContent(text="test streaming response")])
            return
        for update in self.streaming_responses.pop(0):
            yield update


@fixture
def chat_client() -> MockChatClient:
    return MockChatClient()
