# Copyright (c) Microsoft. All rights reserved.

"""Descriptors of the tools hosted by Azure AI Foundry.

The descriptors are dicts holding the payload of the tool definition, chat agents pass them to the
service unchanged, ``AzureAIClient`` adds them to the agent version it creates.
"""

from collections.abc import Mapping
from typing import Any, Literal

from agent_framework.exceptions import ToolException

__all__ = [
    "HostedAzureAISearchTool",
    "HostedBingCustomSearchTool",
    "HostedBrowserAutomationTool",
    "HostedComputerUseTool",
    "HostedFabricTool",
    "HostedMemorySearchTool",
    "HostedOpenAPITool",
    "HostedSharePointTool",
]


def _required(value: str | None, name: str, tool_type: str) -> str:
    if value is None or not value.strip():
        raise ToolException(f"The {name} of the {tool_type} tool must be provided.")
    return value


def _without_none(**values: Any) -> dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


class HostedAzureAISearchTool(dict[str, Any]):
    """Searches an index of an Azure AI Search connection of the project."""

    def __init__(
        self,
        *,
        project_connection_id: str,
        index_name: str,
        query_type: Literal["simple", "semantic", "vector", "vector_simple_hybrid", "vector_semantic_hybrid"]
        | None = None,
        top_k: int | None = None,
        filter: str | None = None,
    ) -> None:
        """Initialize the tool.

        Keyword Args:
            project_connection_id: The id of the Azure AI Search connection.
            index_name: The name of the index to search.
            query_type: The type of the queries, a vector query needs a field with vectorized data.
            top_k: The number of documents to retrieve.
            filter: An OData filter applied to the search.

        Raises:
            ToolException: When the connection id or the index name are blank.
        """
        index = {
            "project_connection_id": _required(project_connection_id, "project_connection_id", "azure_ai_search"),
            "index_name": _required(index_name, "index_name", "azure_ai_search"),
        }
        index.update(_without_none(query_type=query_type, top_k=top_k, filter=filter))
        super().__init__(type="azure_ai_search", azure_ai_search={"indexes": [index]})


class HostedBingCustomSearchTool(dict[str, Any]):
    """Searches the web through a Bing Custom Search instance of the project."""

    def __init__(
        self,
        *,
        project_connection_id: str,
        instance_name: str,
        count: int | None = None,
        market: str | None = None,
        set_lang: str | None = None,
    ) -> None:
        configuration = {
            "project_connection_id": _required(project_connection_id, "project_connection_id", "bing_custom_search"),
            "instance_name": _required(instance_name, "instance_name", "bing_custom_search"),
        }
        configuration.update(_without_none(count=count, market=market, set_lang=set_lang))
        super().__init__(
            type="bing_custom_search_preview",
            bing_custom_search_preview={"search_configurations": [configuration]},
        )


class HostedBrowserAutomationTool(dict[str, Any]):
    """Drives a browser of a Playwright workspace connected to the project."""

    def __init__(self, *, project_connection_id: str) -> None:
        connection_id = _required(project_connection_id, "project_connection_id", "browser_automation")
        super().__init__(
            type="browser_automation_preview",
            browser_automation_preview={"connection": {"project_connection_id": connection_id}},
        )


class HostedSharePointTool(dict[str, Any]):
    """Grounds the answers on the SharePoint sites of a connection."""

    def __init__(self, *, project_connection_id: str) -> None:
        connection_id = _required(project_connection_id, "project_connection_id", "sharepoint_grounding")
        super().__init__(
            type="sharepoint_grounding_preview",
            sharepoint_grounding_preview={"project_connections": [{"project_connection_id": connection_id}]},
        )


class HostedFabricTool(dict[str, Any]):
    """Queries a Microsoft Fabric data agent of a connection."""

    def __init__(self, *, project_connection_id: str) -> None:
        connection_id = _required(project_connection_id, "project_connection_id", "fabric_dataagent")
        super().__init__(
            type="fabric_dataagent_preview",
            fabric_dataagent_preview={"project_connections": [{"project_connection_id": connection_id}]},
        )


class HostedOpenAPITool(dict[str, Any]):
    """Calls the operations of an OpenAPI 3 specification from the service."""

    def __init__(
        self,
        *,
        name: str,
        spec: Mapping[str, Any],
        description: str | None = None,
        auth: Mapping[str, Any] | None = None,
    ) -> None:
        """Initialize the tool.

        Keyword Args:
            name: The name of the tool.
            spec: The OpenAPI specification, as parsed from its JSON document.
            description: What the API can be used for.
            auth: The authentication of the calls, anonymous when not given.

        Raises:
            ToolException: When the name is blank or the specification is empty.
        """
        if not spec:
            raise ToolException("The spec of the openapi tool must be provided.")
        function = {
            "name": _required(name, "name", "openapi"),
            "spec": dict(spec),
            "auth": dict(auth) if auth else {"type": "anonymous"},
        }
        function.update(_without_none(description=description))
        super().__init__(type="openapi", openapi=function)


class HostedMemorySearchTool(dict[str, Any]):
    """Searches and updates the memories of a scope in a Foundry memory store."""

    def __init__(self, *, memory_store_name: str, scope: str, update_delay: int | None = None) -> None:
        if update_delay is not None and update_delay < 0:
            raise ToolException("The update_delay of the memory_search tool must be 0 or more.")
        super().__init__(
            type="memory_search",
            memory_store_name=_required(memory_store_name, "memory_store_name", "memory_search"),
            scope=_required(scope, "scope", "memory_search"),
            **_without_none(update_delay=update_delay),
        )


class HostedComputerUseTool(dict[str, Any]):
    """Lets the model operate a computer by returning actions to perform on screenshots it receives."""

    def __init__(
        self,
        *,
        environment: Literal["windows", "mac", "linux", "ubuntu", "browser"] = "windows",
        display_width: int = 1026,
        display_height: int = 769,
    ) -> None:
        if display_width < 1 or display_height < 1:
            raise ToolException("The display of the computer_use tool must be at least 1 by 1 pixels.")
        super().__init__(
            type="computer_use_preview",
            environment=environment,
            display_width=display_width,
            display_height=display_height,
        )
