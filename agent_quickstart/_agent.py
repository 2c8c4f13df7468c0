# Copyright (c) Microsoft. All rights reserved.

import sys
from collections.abc import AsyncIterable
from typing import Any

from agent_framework import (
    AgentRunResponse,
    AgentRunResponseUpdate,
    AgentThread,
    ChatAgent,
    ChatClientProtocol,
    ChatMessage,
)
from agent_framework_azure_ai import AzureAIClient
from azure.core.exceptions import AzureError

from ._logging import get_logger
from .exceptions import to_quickstart_error

if sys.version_info >= (3, 12):
    from typing import override  # type: ignore # pragma: no cover
else:
    from typing_extensions import override  # type: ignore[import] # pragma: no cover

__all__ = ["QuickstartAgent"]

logger = get_logger("agent_quickstart.agent")


class QuickstartAgent(ChatAgent):
    """A chat agent that reports failures as ``ConfigurationError`` or ``RemoteCallError``.

    Every error raised while running, including the ones raised while the chat client prepares
    the call (creating the server side agent for instance), goes through ``to_quickstart_error``.
    Errors of local tools are raised unchanged.

    Examples:
        .. code-block:: python

            from agent_framework.openai import OpenAIChatClient

            from agent_quickstart import QuickstartAgent

            agent = QuickstartAgent(
                chat_client=OpenAIChatClient(),
                name="Joker",
                instructions="You are good at telling jokes.",
            )
            response = await agent.run("Tell me a joke about a pirate.")
            await agent.delete()
    """

    def __init__(
        self,
        chat_client: ChatClientProtocol,
        instructions: str | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize a QuickstartAgent.

        Args:
            chat_client: The chat client to use for the agent.
            instructions: The instructions sent to the model with every call.
            kwargs: The other arguments of ``ChatAgent``, name, tools and context providers for instance.
        """
        super().__init__(chat_client=chat_client, instructions=instructions, **kwargs)
        # Only a version created by this agent is deleted, not one that was given or looked up.
        self._owns_server_agent = (
            isinstance(chat_client, AzureAIClient)
            and chat_client.agent_version is None
            and not chat_client.use_latest_version
        )

    @override
    async def run(
        self,
        messages: str | ChatMessage | list[str] | list[ChatMessage] | None = None,
        *,
        thread: AgentThread | None = None,
        **kwargs: Any,
    ) -> AgentRunResponse:
        try:
            return await super().run(messages, thread=thread, **kwargs)
        except Exception as ex:
            mapped = to_quickstart_error(ex)
            if mapped is ex:
                raise
            raise mapped from ex

    @override
    async def run_stream(
        self,
        messages: str | ChatMessage | list[str] | list[ChatMessage] | None = None,
        *,
        thread: AgentThread | None = None,
        **kwargs: Any,
    ) -> AsyncIterable[AgentRunResponseUpdate]:
        try:
            async for update in super().run_stream(messages, thread=thread, **kwargs):
                yield update
        except Exception as ex:
            mapped = to_quickstart_error(ex)
            if mapped is ex:
                raise
            raise mapped from ex

    async def delete(self) -> bool:
        """Delete the server side state created for this agent, a best effort cleanup.

        Only the Azure AI agent version created by this agent on its first run is deleted,
        other chat clients keep no state that outlives the call. Failures are logged and not raised.

        Returns:
            True when a server side agent version was deleted.
        """
        chat_client = self.chat_client
        if not isinstance(chat_client, AzureAIClient):
            logger.debug("Agent '%s' has no server side state to delete.", self.name)
            return False
        if not self._owns_server_agent or not chat_client.agent_name or chat_client.agent_version is None:
            return False

        agent_name, agent_version = chat_client.agent_name, chat_client.agent_version
        try:
            await chat_client.project_client.agents.delete_version(agent_name=agent_name, agent_version=agent_version)
        except AzureError as ex:
            logger.warning("Failed to delete version '%s' of agent '%s': %s", agent_version, agent_name, ex)
            return False

        chat_client.agent_version = None
        logger.info("Deleted version '%s' of agent '%s'.", agent_version, agent_name)
        return True
