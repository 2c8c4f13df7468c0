# Copyright (c) Microsoft. All rights reserved.

from collections.abc import Sequence
from typing import Any, Final, Protocol, runtime_checkable
from urllib.parse import quote

from azure.ai.projects.aio import AIProjectClient
from azure.core.exceptions import (
    ClientAuthenticationError,
    HttpResponseError,
    ResourceExistsError,
    ResourceNotFoundError,
    map_error,
)
from azure.core.rest import AsyncHttpResponse, HttpRequest

from .._logging import get_logger
from ._models import (
    CreateMemoryStoreRequest,
    DeleteScopeRequest,
    MemoryInputMessage,
    MemoryStoreDefinition,
    MemoryStoreResponse,
    SearchMemoriesOptions,
    SearchMemoriesRequest,
    SearchMemoriesResponse,
    UpdateMemoriesRequest,
    UpdateMemoriesResponse,
)

__all__ = ["MEMORY_STORES_API_VERSION", "FoundryMemoryOperations", "ProjectClientMemoryOperations"]

logger = get_logger("agent_quickstart.foundry_memory")

MEMORY_STORES_API_VERSION: Final[str] = "2025-11-15-preview"

_ERROR_MAP: Final[dict[int, type[HttpResponseError]]] = {
    401: ClientAuthenticationError,
    404: ResourceNotFoundError,
    409: ResourceExistsError,
}


@runtime_checkable
class FoundryMemoryOperations(Protocol):
    """The memory store operations used by the FoundryMemoryProvider.

    Implementations raise ``azure.core.exceptions.ResourceNotFoundError`` when the store or scope
    does not exist and ``HttpResponseError`` for any other failure.
    """

    async def search_memories(
        self,
        memory_store_name: str,
        scope: str,
        messages: Sequence[MemoryInputMessage],
        max_memories: int,
    ) -> list[str]: ...

    async def update_memories(
        self,
        memory_store_name: str,
        scope: str,
        messages: Sequence[MemoryInputMessage],
        update_delay: int,
    ) -> UpdateMemoriesResponse: ...

    async def delete_scope(self, memory_store_name: str, scope: str) -> None: ...

    async def get_memory_store(self, memory_store_name: str) -> MemoryStoreResponse: ...

    async def create_memory_store(
        self,
        memory_store_name: str,
        chat_model: str,
        embedding_model: str,
        description: str | None = None,
    ) -> MemoryStoreResponse: ...


class ProjectClientMemoryOperations:
    """Memory store operations sent through the HTTP pipeline of an AIProjectClient.

    The pipeline of the project client takes care of authentication, retries and the user agent,
    the requests only carry the JSON bodies of the ``memory_stores`` routes.

    Examples:
        .. code-block:: python

            from agent_quickstart.foundry_memory import ProjectClientMemoryOperations
            from azure.ai.projects.aio import AIProjectClient
            from azure.identity.aio import AzureCliCredential

            async with AzureCliCredential() as credential, AIProjectClient(endpoint, credential) as project_client:
                operations = ProjectClientMemoryOperations(project_client)
                memories = await operations.search_memories("chat_memories", "user_42", messages, max_memories=5)
    """

    def __init__(self, project_client: AIProjectClient, api_version: str = MEMORY_STORES_API_VERSION) -> None:
        self.project_client = project_client
        self.api_version = api_version

    async def search_memories(
        self,
        memory_store_name: str,
        scope: str,
        messages: Sequence[MemoryInputMessage],
        max_memories: int,
    ) -> list[str]:
        """Search the memories of a scope that are relevant to the messages.

        Returns:
            The contents of the memories found, blank memories are left out.
        """
        body = SearchMemoriesRequest(
            scope=scope,
            items=list(messages),
            options=SearchMemoriesOptions(max_memories=max_memories),
        )
        url = f"/memory_stores/{_quote(memory_store_name)}:search_memories"
        payload = await self._send("POST", url, body.to_body())
        return SearchMemoriesResponse.model_validate(payload or {}).contents

    async def update_memories(
        self,
        memory_store_name: str,
        scope: str,
        messages: Sequence[MemoryInputMessage],
        update_delay: int,
    ) -> UpdateMemoriesResponse:
        """Start an update of the memories of a scope, the service runs it in the background."""
        body = UpdateMemoriesRequest(scope=scope, items=list(messages), update_delay=update_delay)
        url = f"/memory_stores/{_quote(memory_store_name)}:update_memories"
        payload = await self._send("POST", url, body.to_body())
        return UpdateMemoriesResponse.model_validate(payload or {})

    async def get_update_result(self, memory_store_name: str, update_id: str) -> UpdateMemoriesResponse:
        """Get the status of a memory update started with ``update_memories``."""
        payload = await self._send(
            "GET", f"/memory_stores/{_quote(memory_store_name)}/updates/{_quote(update_id)}", None
        )
        return UpdateMemoriesResponse.model_validate(payload or {})

    async def delete_scope(self, memory_store_name: str, scope: str) -> None:
        """Delete all the memories of a scope."""
        body = DeleteScopeRequest(scope=scope)
        await self._send("POST", f"/memory_stores/{_quote(memory_store_name)}:delete_scope", body.to_body())

    async def get_memory_store(self, memory_store_name: str) -> MemoryStoreResponse:
        payload = await self._send("GET", f"/memory_stores/{_quote(memory_store_name)}", None)
        return MemoryStoreResponse.model_validate(payload or {})

    async def create_memory_store(
        self,
        memory_store_name: str,
        chat_model: str,
        embedding_model: str,
        description: str | None = None,
    ) -> MemoryStoreResponse:
        body = CreateMemoryStoreRequest(
            name=memory_store_name,
            description=description,
            definition=MemoryStoreDefinition(chat_model=chat_model, embedding_model=embedding_model),
        )
        payload = await self._send("POST", "/memory_stores", body.to_body())
        return MemoryStoreResponse.model_validate(payload or {})

    async def _send(self, method: str, url: str, body: dict[str, Any] | None) -> Any:
        request = HttpRequest(
            method,
            url,
            params={"api-version": self.api_version},
            headers={"Accept": "application/json"},
            json=body,
        )
        logger.debug("Sending %s %s", method, url)
        response: AsyncHttpResponse = await self.project_client.send_request(request)
        await response.read()
        if response.status_code not in (200, 201, 202, 204):
            map_error(status_code=response.status_code, response=response, error_map=_ERROR_MAP)  # type: ignore
            raise HttpResponseError(response=response)  # type: ignore[arg-type]
        if not response.content:
            return None
        return response.json()


def _quote(value: str) -> str:
    return quote(value, safe="")
