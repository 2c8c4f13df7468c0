# Copyright (c) Microsoft. All rights reserved.

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "CreateMemoryStoreRequest",
    "DeleteScopeRequest",
    "MemoryInputMessage",
    "MemoryItem",
    "MemorySearchResult",
    "MemoryStoreDefinition",
    "MemoryStoreResponse",
    "SearchMemoriesOptions",
    "SearchMemoriesRequest",
    "SearchMemoriesResponse",
    "UpdateMemoriesError",
    "UpdateMemoriesRequest",
    "UpdateMemoriesResponse",
]


class _MemoryModel(BaseModel):
    """Base of the JSON bodies exchanged with the memory store routes."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class MemoryInputMessage(_MemoryModel):
    """A message that is searched with or stored in a memory store."""

    role: str
    content: str


class MemoryItem(_MemoryModel):
    memory_id: str | None = None
    content: str | None = None
    memory_type: str | None = None


class MemorySearchResult(_MemoryModel):
    memory_item: MemoryItem | None = None
    score: float = 0.0


class SearchMemoriesOptions(_MemoryModel):
    max_memories: int = 5


class SearchMemoriesRequest(_MemoryModel):
    scope: str
    items: list[MemoryInputMessage] = Field(default_factory=list)
    options: SearchMemoriesOptions | None = None


class SearchMemoriesResponse(_MemoryModel):
    search_id: str | None = None
    memories: list[MemorySearchResult] | None = None

    @property
    def contents(self) -> list[str]:
        """The non-blank contents of the memories found."""
        return [
            result.memory_item.content
            for result in self.memories or []
            if result.memory_item and result.memory_item.content and result.memory_item.content.strip()
        ]


class UpdateMemoriesRequest(_MemoryModel):
    scope: str
    items: list[MemoryInputMessage] = Field(default_factory=list)
    update_delay: int = 0
    previous_update_id: str | None = None


class UpdateMemoriesError(_MemoryModel):
    code: str | None = None
    message: str | None = None


class UpdateMemoriesResponse(_MemoryModel):
    update_id: str | None = None
    status: str | None = None
    error: UpdateMemoriesError | None = None


class DeleteScopeRequest(_MemoryModel):
    scope: str


class MemoryStoreDefinition(_MemoryModel):
    kind: str = "default"
    chat_model: str | None = None
    embedding_model: str | None = None


class CreateMemoryStoreRequest(_MemoryModel):
    name: str
    description: str | None = None
    definition: MemoryStoreDefinition | None = None


class MemoryStoreResponse(_MemoryModel):
    id: str | None = None
    name: str | None = None
    description: str | None = None
