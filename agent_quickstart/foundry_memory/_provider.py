# Copyright (c) Microsoft. All rights reserved.

import sys
from collections.abc import Mapping, MutableSequence, Sequence
from types import TracebackType
from typing import Any, Final

from agent_framework import ChatMessage, Context, ContextProvider, Role
from agent_framework_azure_ai import AzureAISettings
from azure.ai.projects.aio import AIProjectClient
from azure.core.credentials_async import AsyncTokenCredential
from azure.core.exceptions import HttpResponseError, ResourceNotFoundError
from pydantic import BaseModel, ValidationError

from .._logging import get_logger
from ..exceptions import ConfigurationError, RemoteCallError
from ._models import MemoryInputMessage
from ._operations import FoundryMemoryOperations, ProjectClientMemoryOperations

if sys.version_info >= (3, 12):
    from typing import override  # type: ignore # pragma: no cover
else:
    from typing_extensions import override  # type: ignore[import] # pragma: no cover
if sys.version_info >= (3, 11):
    from typing import Self  # pragma: no cover
else:
    from typing_extensions import Self  # pragma: no cover

__all__ = ["FoundryMemoryProvider", "FoundryMemoryProviderScope"]

logger = get_logger("agent_quickstart.foundry_memory")

REDACTED: Final[str] = "<redacted>"
_ALLOWED_ROLES: Final[frozenset[str]] = frozenset({"user", "assistant", "system"})


class FoundryMemoryProviderScope(BaseModel):
    """The scope the memories of a provider are stored under, a user id for instance."""

    scope: str


class FoundryMemoryProvider(ContextProvider):
    """A context provider backed by an Azure AI Foundry memory store.

    Before each invocation the memories relevant to the new messages are searched and added
    to the call as a user message, after each successful invocation the exchange is sent to
    the store so that the service can extract new memories from it.

    Examples:
        .. code-block:: python

            from agent_quickstart.foundry_memory import FoundryMemoryProvider, FoundryMemoryProviderScope

            memory = FoundryMemoryProvider(
                project_client=project_client,
                memory_store_name="chat_memories",
                scope=FoundryMemoryProviderScope(scope="user_42"),
            )
            agent = QuickstartAgent(chat_client=client, name="TravelAssistant", context_providers=memory)
    """

    def __init__(
        self,
        *,
        memory_store_name: str,
        scope: FoundryMemoryProviderScope | str,
        project_client: AIProjectClient | None = None,
        memory_operations: FoundryMemoryOperations | None = None,
        project_endpoint: str | None = None,
        async_credential: AsyncTokenCredential | None = None,
        context_prompt: str | None = None,
        max_memories: int = 5,
        update_delay: int = 0,
        enable_sensitive_telemetry_data: bool = False,
        env_file_path: str | None = None,
        env_file_encoding: str | None = None,
    ) -> None:
        """Initialize the FoundryMemoryProvider.

        Keyword Args:
            memory_store_name: The name of the memory store, it must exist, see ``ensure_memory_store_created``.
            scope: The scope of the memories.
            project_client: An existing AIProjectClient to use, it is not closed by this instance.
            memory_operations: The operations to use instead of the ones built on the project client.
            project_endpoint: The Azure AI Project endpoint URL, used when no project client is given.
                Can also be set via environment variable AZURE_AI_PROJECT_ENDPOINT.
            async_credential: Azure async credential, used when no project client is given.
            context_prompt: The prompt put before the memories, defaults to ``DEFAULT_CONTEXT_PROMPT``.
            max_memories: The maximum number of memories to retrieve per invocation.
            update_delay: The delay in seconds the service waits before processing a memory update.
            enable_sensitive_telemetry_data: Log the scope and the memories instead of ``<redacted>``.
            env_file_path: Path to environment file for loading settings.
            env_file_encoding: Encoding of the environment file.

        Raises:
            ConfigurationError: When the memory store name or the scope are blank, or when no
                way to reach the project is given.
        """
        if not memory_store_name or not memory_store_name.strip():
            raise ConfigurationError("The memory_store_name must be provided.")
        if isinstance(scope, str):
            scope = FoundryMemoryProviderScope(scope=scope)
        if not scope.scope or not scope.scope.strip():
            raise ConfigurationError("The scope must be provided.")
        if max_memories < 1:
            raise ConfigurationError("max_memories must be 1 or more.")
        if update_delay < 0:
            raise ConfigurationError("update_delay must be 0 or more.")

        should_close_client = False
        if memory_operations is None:
            if project_client is None:
                try:
                    settings = AzureAISettings(
                        project_endpoint=project_endpoint,
                        env_file_path=env_file_path,
                        env_file_encoding=env_file_encoding,
                    )
                except ValidationError as ex:
                    raise ConfigurationError("Failed to create Azure AI settings.", ex) from ex
                if not settings.project_endpoint:
                    raise ConfigurationError(
                        "Azure AI project endpoint is required. Set via 'project_endpoint' parameter "
                        "or 'AZURE_AI_PROJECT_ENDPOINT' environment variable."
                    )
                if not async_credential:
                    raise ConfigurationError("Azure credential is required when project_client is not provided.")
                project_client = AIProjectClient(endpoint=settings.project_endpoint, credential=async_credential)
                should_close_client = True
            memory_operations = ProjectClientMemoryOperations(project_client)

        self.memory_store_name = memory_store_name
        self.scope = scope
        self.context_prompt = context_prompt or self.DEFAULT_CONTEXT_PROMPT
        self.max_memories = max_memories
        self.update_delay = update_delay
        self.enable_sensitive_telemetry_data = enable_sensitive_telemetry_data
        self.project_client = project_client
        self._operations = memory_operations
        self._should_close_client = should_close_client

    async def __aenter__(self) -> "Self":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the project client when it was created by this provider."""
        if self._should_close_client and self.project_client is not None:
            await self.project_client.close()
            self._should_close_client = False

    @override
    async def invoking(self, messages: ChatMessage | MutableSequence[ChatMessage], **kwargs: Any) -> Context:
        """Search the memories relevant to the messages.

        Returns:
            A context with one user message listing the memories, empty when nothing was found
            or when the search failed.
        """
        messages_list = [messages] if isinstance(messages, ChatMessage) else list(messages)
        items = [
            MemoryInputMessage(role=message.role.value.lower(), content=message.text)
            for message in messages_list
            if message.text and message.text.strip()
        ]
        if not items:
            return Context()

        try:
            memories = await self._operations.search_memories(
                self.memory_store_name,
                self.scope.scope,
                items,
                self.max_memories,
            )
        except Exception:
            logger.exception(
                "Failed to search for memories. MemoryStore: '%s', Scope: '%s'.",
                self.memory_store_name,
                self._sanitize(self.scope.scope),
            )
            return Context()

        memories = [memory for memory in memories if memory and memory.strip()]
        logger.info(
            "Retrieved %d memories. MemoryStore: '%s', Scope: '%s'.",
            len(memories),
            self.memory_store_name,
            self._sanitize(self.scope.scope),
        )
        if not memories:
            return Context()

        text = f"{self.context_prompt}\n" + "\n".join(memories)
        logger.debug("Memory search results:\n%s", self._sanitize(text))
        return Context(messages=[ChatMessage(role=Role.USER, text=text)])

    @override
    async def invoked(
        self,
        request_messages: ChatMessage | Sequence[ChatMessage],
        response_messages: ChatMessage | Sequence[ChatMessage] | None = None,
        invoke_exception: Exception | None = None,
        **kwargs: Any,
    ) -> None:
        """Send the exchange to the memory store, failed invocations are not remembered."""
        if invoke_exception is not None:
            return

        messages_list = [request_messages] if isinstance(request_messages, ChatMessage) else list(request_messages)
        if isinstance(response_messages, ChatMessage):
            messages_list.append(response_messages)
        elif response_messages:
            messages_list.extend(response_messages)

        items = [
            MemoryInputMessage(role=message.role.value.lower(), content=message.text)
            for message in messages_list
            if message.role.value.lower() in _ALLOWED_ROLES and message.text and message.text.strip()
        ]
        if not items:
            return

        try:
            response = await self._operations.update_memories(
                self.memory_store_name,
                self.scope.scope,
                items,
                self.update_delay,
            )
        except Exception:
            logger.exception(
                "Failed to send messages to update memories. MemoryStore: '%s', Scope: '%s'.",
                self.memory_store_name,
                self._sanitize(self.scope.scope),
            )
            return

        logger.info(
            "Sent %d messages to update memories. MemoryStore: '%s', Scope: '%s', UpdateId: '%s'.",
            len(items),
            self.memory_store_name,
            self._sanitize(self.scope.scope),
            response.update_id,
        )

    async def ensure_stored_memories_deleted(self) -> None:
        """Delete the memories stored for the scope, nothing happens when there are none.

        Raises:
            RemoteCallError: When the service fails the deletion.
        """
        try:
            await self._operations.delete_scope(self.memory_store_name, self.scope.scope)
        except ResourceNotFoundError:
            logger.debug(
                "No memories to delete. MemoryStore: '%s', Scope: '%s'.",
                self.memory_store_name,
                self._sanitize(self.scope.scope),
            )
        except HttpResponseError as ex:
            raise RemoteCallError(f"Failed to delete the memories of the scope: {ex.message}", ex) from ex

    async def ensure_memory_store_created(
        self,
        chat_model: str,
        embedding_model: str,
        description: str | None = None,
    ) -> bool:
        """Create the memory store when it does not exist yet.

        Args:
            chat_model: The deployment of the chat model the store extracts memories with.
            embedding_model: The deployment of the embedding model the store searches with.
            description: The description of the store.

        Returns:
            True when the store was created, False when it already existed.

        Raises:
            RemoteCallError: When the service fails the lookup or the creation.
        """
        try:
            await self._operations.get_memory_store(self.memory_store_name)
        except ResourceNotFoundError:
            pass
        except HttpResponseError as ex:
            raise RemoteCallError(f"Failed to get the memory store: {ex.message}", ex) from ex
        else:
            logger.debug("Memory store '%s' already exists.", self.memory_store_name)
            return False

        try:
            await self._operations.create_memory_store(
                self.memory_store_name,
                chat_model,
                embedding_model,
                description,
            )
        except HttpResponseError as ex:
            raise RemoteCallError(f"Failed to create the memory store: {ex.message}", ex) from ex
        logger.info("Created memory store '%s'.", self.memory_store_name)
        return True

    def serialize(self) -> dict[str, Any]:
        """Serialize the state of the provider, the scope, to a JSON compatible dict."""
        return {"scope": self.scope.model_dump()}

    @classmethod
    def deserialize(cls, serialized_state: Mapping[str, Any], **kwargs: Any) -> "FoundryMemoryProvider":
        """Create a provider from the state returned by ``serialize``.

        Args:
            serialized_state: The serialized state.
            kwargs: The other arguments of the provider, ``memory_store_name`` and a way to reach the project.

        Raises:
            ConfigurationError: When the state does not contain a scope.
        """
        try:
            scope = FoundryMemoryProviderScope.model_validate(serialized_state.get("scope") or {})
        except ValidationError as ex:
            raise ConfigurationError("The serialized state did not contain the required scope property.", ex) from ex
        if not scope.scope.strip():
            raise ConfigurationError("The serialized state did not contain the required scope property.")
        return cls(scope=scope, **kwargs)

    def _sanitize(self, data: str | None) -> str | None:
        return data if self.enable_sensitive_telemetry_data else REDACTED
