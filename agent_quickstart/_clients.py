# Copyright (c) Microsoft. All rights reserved.

from collections.abc import Callable
from typing import Any, Final, Literal

from agent_framework import ChatClientProtocol
from agent_framework.azure import AzureOpenAIResponsesClient
from agent_framework.exceptions import ServiceInitializationError
from agent_framework.openai import OpenAIChatClient, OpenAIResponsesClient
from agent_framework_anthropic import AnthropicClient
from agent_framework_azure_ai import AzureAIClient

from ._agent import QuickstartAgent
from ._logging import get_logger
from ._settings import SampleSettings
from .exceptions import ConfigurationError

__all__ = ["PROVIDERS", "Provider", "create_agent", "create_chat_client"]

logger = get_logger("agent_quickstart.clients")

Provider = Literal["openai-chat", "openai-responses", "anthropic", "azure-ai", "azure-openai-responses"]

PROVIDERS: Final[dict[str, Callable[..., ChatClientProtocol]]] = {
    "openai-chat": OpenAIChatClient,
    "openai-responses": OpenAIResponsesClient,
    "anthropic": AnthropicClient,
    "azure-ai": AzureAIClient,
    "azure-openai-responses": AzureOpenAIResponsesClient,
}


def create_chat_client(provider: Provider | str, **kwargs: Any) -> ChatClientProtocol:
    """Create the chat client of a provider, reading what is not passed from the environment.

    Args:
        provider: One of the keys of ``PROVIDERS``.
        kwargs: The arguments of the client, ``async_credential`` for Azure AI or ``credential``
            for Azure OpenAI for instance.

    Returns:
        The chat client, no network call is made.

    Raises:
        ConfigurationError: When the provider is unknown or a required setting is missing.
    """
    client_type = PROVIDERS.get(provider)
    if client_type is None:
        raise ConfigurationError(f"Unknown provider '{provider}', use one of: {', '.join(PROVIDERS)}.")

    settings = SampleSettings(env_file_path=kwargs.get("env_file_path"))
    # The Anthropic client only checks its model when called, Azure AI when creating the agent.
    if provider == "anthropic" and not kwargs.get("model_id"):
        settings.require("anthropic_chat_model_id")
    if (
        provider == "azure-ai"
        and not kwargs.get("model_deployment_name")
        and not kwargs.get("agent_version")
        and not kwargs.get("use_latest_version")
    ):
        settings.require("azure_ai_model_deployment_name")

    try:
        client = client_type(**kwargs)
    except ServiceInitializationError as ex:
        raise ConfigurationError(f"Failed to create the {provider} chat client: {ex.args[0]}", ex) from ex
    logger.debug("Created %s chat client for provider '%s'.", type(client).__name__, provider)
    return client


def create_agent(
    provider: Provider | str,
    *,
    instructions: str | None = None,
    client_kwargs: dict[str, Any] | None = None,
    **kwargs: Any,
) -> QuickstartAgent:
    """Create a ``QuickstartAgent`` on the chat client of a provider.

    Args:
        provider: One of the keys of ``PROVIDERS``.

    Keyword Args:
        instructions: The instructions of the agent.
        client_kwargs: The arguments of ``create_chat_client``.
        kwargs: The other arguments of the agent, name and tools for instance.

    Raises:
        ConfigurationError: When the chat client cannot be created.
    """
    return QuickstartAgent(
        chat_client=create_chat_client(provider, **(client_kwargs or {})),
        instructions=instructions,
        **kwargs,
    )
