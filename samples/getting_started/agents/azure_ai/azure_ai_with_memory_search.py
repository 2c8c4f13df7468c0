# Copyright (c) Microsoft. All rights reserved.

import asyncio
import os
import platform

from agent_framework.azure import AzureAIClient
from agent_quickstart import HostedMemorySearchTool, QuickstartAgent
from azure.identity.aio import AzureCliCredential

"""
Azure AI Agent with Memory Search Example

This sample demonstrates the memory search tool hosted by the service: the agent
remembers what the user shared in one run and recalls it in a later run.

Prerequisites:
1. Set AZURE_AI_PROJECT_ENDPOINT and AZURE_AI_MODEL_DEPLOYMENT_NAME environment variables.
2. Set AZURE_AI_MEMORY_STORE_NAME to an existing memory store of the project,
    see samples/getting_started/memory/foundry_memory_provider.py to create one.
"""


async def main() -> None:
    # The scope keeps the memories of one user apart from the others.
    user_scope = f"user_{platform.node()}"

    async with (
        AzureCliCredential() as credential,
        QuickstartAgent(
            chat_client=AzureAIClient(async_credential=credential),
            name="MemorySearchAgent",
            instructions="""You are a helpful assistant that remembers past conversations.
            Use the memory search tool to recall relevant information from previous interactions.
            When a user shares personal details or preferences, remember them for future conversations.""",
            tools=HostedMemorySearchTool(
                memory_store_name=os.environ["AZURE_AI_MEMORY_STORE_NAME"],
                scope=user_scope,
                update_delay=1,
            ),
        ) as agent,
    ):
        try:
            query = "My name is Alice and I love programming in Python."
            print(f"User: {query}")
            result = await agent.run(query)
            print(f"Agent: {result}\n")

            # Allow time for the memories to be indexed
            await asyncio.sleep(2)

            query = "What's my name and what programming language do I prefer?"
            print(f"User: {query}")
            result = await agent.run(query)
            print(f"Agent: {result}\n")
        finally:
            # The memory store is long lived and is not deleted with the agent.
            await agent.delete()


if __name__ == "__main__":
    asyncio.run(main())
