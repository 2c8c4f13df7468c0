# Copyright (c) Microsoft. All rights reserved.

import logging
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from agent_framework import ChatMessage, Context, Role
from azure.core.exceptions import HttpResponseError, ResourceNotFoundError

from agent_quickstart import QuickstartAgent
from agent_quickstart.exceptions import ConfigurationError, RemoteCallError
from agent_quickstart.foundry_memory import (
    FoundryMemoryProvider,
    FoundryMemoryProviderScope,
    MemoryInputMessage,
    MemoryStoreResponse,
    ProjectClientMemoryOperations,
    UpdateMemoriesResponse,
)


@pytest.fixture
def memory_operations() -> MagicMock:
    operations = MagicMock()
    operations.search_memories = AsyncMock(return_value=[])
    operations.update_memories = AsyncMock(return_value=UpdateMemoriesResponse(update_id="upd_1", status="queued"))
    operations.delete_scope = AsyncMock()
    operations.get_memory_store = AsyncMock(return_value=MemoryStoreResponse(name="chat_memories"))
    operations.create_memory_store = AsyncMock(return_value=MemoryStoreResponse(name="chat_memories"))
    return operations


@pytest.fixture
def provider(memory_operations: MagicMock) -> FoundryMemoryProvider:
    return FoundryMemoryProvider(
        memory_store_name="chat_memories",
        scope=FoundryMemoryProviderScope(scope="user_42"),
        memory_operations=memory_operations,
    )


# Initialization


@pytest.mark.parametrize(
    ("kwargs", "message"),
    [
        ({"memory_store_name": "  ", "scope": "user_42"}, "memory_store_name must be provided"),
        ({"memory_store_name": "chat_memories", "scope": " "}, "scope must be provided"),
        ({"memory_store_name": "chat_memories", "scope": "user_42", "max_memories": 0}, "max_memories"),
        ({"memory_store_name": "chat_memories", "scope": "user_42", "update_delay": -1}, "update_delay"),
    ],
)
def test_init_validation(memory_operations: MagicMock, kwargs: dict, message: str) -> None:
    with pytest.raises(ConfigurationError, match=message):
        FoundryMemoryProvider(memory_operations=memory_operations, **kwargs)


def test_init_defaults(memory_operations: MagicMock) -> None:
    provider = FoundryMemoryProvider(
        memory_store_name="chat_memories", scope="user_42", memory_operations=memory_operations
    )

    assert provider.scope == FoundryMemoryProviderScope(scope="user_42")
    assert provider.context_prompt == FoundryMemoryProvider.DEFAULT_CONTEXT_PROMPT
    assert provider.max_memories == 5
    assert provider.update_delay == 0


def test_init_with_project_client(mock_project_client: MagicMock) -> None:
    provider = FoundryMemoryProvider(
        memory_store_name="chat_memories", scope="user_42", project_client=mock_project_client
    )
    assert isinstance(provider._operations, ProjectClientMemoryOperations)
    assert provider._operations.project_client is mock_project_client
    assert not provider._should_close_client


def test_init_requires_endpoint(monkeypatch: pytest.MonkeyPatch, mock_azure_credential: MagicMock) -> None:
    monkeypatch.delenv("AZURE_AI_PROJECT_ENDPOINT", raising=False)
    with pytest.raises(ConfigurationError, match="project endpoint is required"):
        FoundryMemoryProvider(
            memory_store_name="chat_memories", scope="user_42", async_credential=mock_azure_credential
        )


def test_init_requires_credential(azure_ai_unit_test_env: dict[str, str]) -> None:
    with pytest.raises(ConfigurationError, match="credential is required"):
        FoundryMemoryProvider(memory_store_name="chat_memories", scope="user_42")


async def test_owned_project_client_is_closed(
    azure_ai_unit_test_env: dict[str, str], mock_azure_credential: MagicMock
) -> None:
    with patch("agent_quickstart.foundry_memory._provider.AIProjectClient") as mock_ai_project_client:
        mock_ai_project_client.return_value.close = AsyncMock()
        provider = FoundryMemoryProvider(
            memory_store_name="chat_memories", scope="user_42", async_credential=mock_azure_credential
        )

    async with provider:
        pass
    await provider.close()

    mock_ai_project_client.assert_called_once_with(
        endpoint=azure_ai_unit_test_env["AZURE_AI_PROJECT_ENDPOINT"], credential=mock_azure_credential
    )
    mock_ai_project_client.return_value.close.assert_awaited_once()


# Invoking


async def test_invoking_returns_memories(provider: FoundryMemoryProvider, memory_operations: MagicMock) -> None:
    memory_operations.search_memories.return_value = ["Prefers window seats.", "  ", "Allergic to peanuts."]
    messages = [
        ChatMessage(role="system", text="You are a travel assistant."),
        ChatMessage(role="user", text="Book me a flight to Paris."),
        ChatMessage(role="user", text="   "),
    ]

    context = await provider.invoking(messages)

    memory_operations.search_memories.assert_awaited_once_with(
        "chat_memories",
        "user_42",
        [
            MemoryInputMessage(role="system", content="You are a travel assistant."),
            MemoryInputMessage(role="user", content="Book me a flight to Paris."),
        ],
        5,
    )
    assert len(context.messages) == 1
    assert context.messages[0].role == Role.USER
    assert context.messages[0].text == (
        f"{FoundryMemoryProvider.DEFAULT_CONTEXT_PROMPT}\nPrefers window seats.\nAllergic to peanuts."
    )


async def test_invoking_single_message_and_custom_prompt(memory_operations: MagicMock) -> None:
    memory_operations.search_memories.return_value = ["Likes pirates."]
    provider = FoundryMemoryProvider(
        memory_store_name="chat_memories",
        scope="user_42",
        memory_operations=memory_operations,
        context_prompt="Known facts:",
        max_memories=2,
    )

    context = await provider.invoking(ChatMessage(role="user", text="Tell me a joke."))

    assert context.messages[0].text == "Known facts:\nLikes pirates."
    assert memory_operations.search_memories.call_args.args[3] == 2


async def test_invoking_without_text_skips_search(
    provider: FoundryMemoryProvider, memory_operations: MagicMock
) -> None:
    context = await provider.invoking([ChatMessage(role="user", text=" ")])

    assert isinstance(context, Context)
    assert context.messages == []
    memory_operations.search_memories.assert_not_called()


async def test_invoking_without_memories(provider: FoundryMemoryProvider, memory_operations: MagicMock) -> None:
    memory_operations.search_memories.return_value = ["", "  "]
    context = await provider.invoking([ChatMessage(role="user", text="Hello")])
    assert context.messages == []


async def test_invoking_failure_returns_empty_context(
    provider: FoundryMemoryProvider, memory_operations: MagicMock, caplog: pytest.LogCaptureFixture
) -> None:
    memory_operations.search_memories.side_effect = HttpResponseError(message="service unavailable")

    with caplog.at_level(logging.ERROR, logger="agent_quickstart.foundry_memory"):
        context = await provider.invoking([ChatMessage(role="user", text="Hello")])

    assert context.messages == []
    assert "Failed to search for memories" in caplog.text
    assert "user_42" not in caplog.text
    assert "<redacted>" in caplog.text


async def test_sensitive_logging(memory_operations: MagicMock, caplog: pytest.LogCaptureFixture) -> None:
    memory_operations.search_memories.return_value = ["Prefers window seats."]
    provider = FoundryMemoryProvider(
        memory_store_name="chat_memories",
        scope="user_42",
        memory_operations=memory_operations,
        enable_sensitive_telemetry_data=True,
    )

    with caplog.at_level(logging.DEBUG, logger="agent_quickstart.foundry_memory"):
        await provider.invoking([ChatMessage(role="user", text="Hello")])

    assert "user_42" in caplog.text
    assert "Prefers window seats." in caplog.text


# Invoked


async def test_invoked_sends_exchange(provider: FoundryMemoryProvider, memory_operations: MagicMock) -> None:
    request = [
        ChatMessage(role="user", text="I prefer window seats."),
        ChatMessage(role="tool", text="tool output"),
        ChatMessage(role="user", text=""),
    ]

    await provider.invoked(request, ChatMessage(role="assistant", text="Noted, window seats it is."))

    memory_operations.update_memories.assert_awaited_once_with(
        "chat_memories",
        "user_42",
        [
            MemoryInputMessage(role="user", content="I prefer window seats."),
            MemoryInputMessage(role="assistant", content="Noted, window seats it is."),
        ],
        0,
    )


async def test_invoked_with_response_list(provider: FoundryMemoryProvider, memory_operations: MagicMock) -> None:
    await provider.invoked(
        ChatMessage(role="user", text="Hi"),
        [ChatMessage(role="assistant", text="Hello"), ChatMessage(role="assistant", text="How can I help?")],
    )
    assert len(memory_operations.update_memories.call_args.args[2]) == 3


async def test_invoked_skips_failed_invocations(provider: FoundryMemoryProvider, memory_operations: MagicMock) -> None:
    await provider.invoked(
        [ChatMessage(role="user", text="Hi")], None, invoke_exception=RuntimeError("the model failed")
    )
    memory_operations.update_memories.assert_not_called()


async def test_invoked_without_text(provider: FoundryMemoryProvider, memory_operations: MagicMock) -> None:
    await provider.invoked([ChatMessage(role="tool", text="result")], None)
    memory_operations.update_memories.assert_not_called()


async def test_invoked_failure_is_logged(
    provider: FoundryMemoryProvider, memory_operations: MagicMock, caplog: pytest.LogCaptureFixture
) -> None:
    memory_operations.update_memories.side_effect = HttpResponseError(message="throttled")

    with caplog.at_level(logging.ERROR, logger="agent_quickstart.foundry_memory"):
        await provider.invoked([ChatMessage(role="user", text="Hi")], None)

    assert "Failed to send messages to update memories" in caplog.text


# Store management


async def test_ensure_stored_memories_deleted(provider: FoundryMemoryProvider, memory_operations: MagicMock) -> None:
    await provider.ensure_stored_memories_deleted()
    memory_operations.delete_scope.assert_awaited_once_with("chat_memories", "user_42")

    memory_operations.delete_scope.side_effect = ResourceNotFoundError("no such scope")
    await provider.ensure_stored_memories_deleted()

    memory_operations.delete_scope.side_effect = HttpResponseError(message="forbidden")
    with pytest.raises(RemoteCallError, match="Failed to delete the memories"):
        await provider.ensure_stored_memories_deleted()


async def test_ensure_memory_store_created(provider: FoundryMemoryProvider, memory_operations: MagicMock) -> None:
    assert not await provider.ensure_memory_store_created("gpt-4o", "text-embedding-3-small")
    memory_operations.create_memory_store.assert_not_called()

    memory_operations.get_memory_store.side_effect = ResourceNotFoundError("no such store")
    assert await provider.ensure_memory_store_created("gpt-4o", "text-embedding-3-small", "Chat memories")
    memory_operations.create_memory_store.assert_awaited_once_with(
        "chat_memories", "gpt-4o", "text-embedding-3-small", "Chat memories"
    )


async def test_ensure_memory_store_created_failures(
    provider: FoundryMemoryProvider, memory_operations: MagicMock
) -> None:
    memory_operations.get_memory_store.side_effect = HttpResponseError(message="forbidden")
    with pytest.raises(RemoteCallError, match="Failed to get the memory store"):
        await provider.ensure_memory_store_created("gpt-4o", "text-embedding-3-small")

    memory_operations.get_memory_store.side_effect = ResourceNotFoundError("no such store")
    memory_operations.create_memory_store.side_effect = HttpResponseError(message="quota exceeded")
    with pytest.raises(RemoteCallError, match="Failed to create the memory store"):
        await provider.ensure_memory_store_created("gpt-4o", "text-embedding-3-small")


# Serialization


def test_serialize_and_deserialize(provider: FoundryMemoryProvider, memory_operations: MagicMock) -> None:
    state = provider.serialize()
    assert state == {"scope": {"scope": "user_42"}}

    restored = FoundryMemoryProvider.deserialize(
        state, memory_store_name="chat_memories", memory_operations=memory_operations
    )
    assert restored.scope.scope == "user_42"
    assert restored.memory_store_name == "chat_memories"


@pytest.mark.parametrize("state", [{}, {"scope": {}}, {"scope": {"scope": "  "}}])
def test_deserialize_requires_scope(memory_operations: MagicMock, state: dict) -> None:
    with pytest.raises(ConfigurationError, match="required scope property"):
        FoundryMemoryProvider.deserialize(state, memory_store_name="chat_memories", memory_operations=memory_operations)


# Agent integration


async def test_agent_uses_memories(chat_client, provider: FoundryMemoryProvider, memory_operations: MagicMock) -> None:
    memory_operations.search_memories.return_value = ["The user's name is Ada."]
    agent = QuickstartAgent(chat_client=chat_client, name="Assistant", context_providers=provider)

    async with agent:
        response = await agent.run("What is my name?")

    assert response.text == "test response"
    sent_messages, _ = chat_client.calls[0]
    assert any("The user's name is Ada." in message.text for message in sent_messages)
    sent_items = memory_operations.update_memories.call_args.args[2]
    assert [item.role for item in sent_items] == ["user", "assistant"]
    assert sent_items[0].content == "What is my name?"
