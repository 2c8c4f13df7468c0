# Copyright (c) Microsoft. All rights reserved.

import asyncio
import logging
import uuid

from agent_framework.azure import AzureAIClient
from agent_quickstart import QuickstartAgent, SampleSettings, setup_logging
from agent_quickstart.foundry_memory import FoundryMemoryProvider, FoundryMemoryProviderScope
from azure.ai.projects.aio import AIProjectClient
from azure.identity.aio import AzureCliCredential

"""
Foundry Memory Provider Example

This sample demonstrates a context provider backed by an Azure AI Foundry memory store.
The memories relevant to each question are added to the call, and each exchange is sent
to the store so that the service extracts new memories from it.

Prerequisites:
1. Set AZURE_AI_PROJECT_ENDPOINT and AZURE_AI_MODEL_DEPLOYMENT_NAME environment variables.
2. Set AZURE_AI_MEMORY_STORE_NAME, AZURE_AI_MEMORY_CHAT_MODEL_DEPLOYMENT_NAME and
    AZURE_AI_MEMORY_EMBEDDING_MODEL_DEPLOYMENT_NAME, the store is created when it does not exist yet.
"""


async def main() -> None:
    print("=== Foundry Memory Provider Example ===\n")
    # Shows the memory searches and updates the provider logs.
    setup_logging(logging.INFO)

    settings = SampleSettings()
    settings.require(
        "azure_ai_project_endpoint",
        "azure_ai_memory_store_name",
        "azure_ai_memory_chat_model_deployment_name",
        "azure_ai_memory_embedding_model_deployment_name",
    )

    # Each run of the sample uses a new scope, so it starts without memories.
    scope = FoundryMemoryProviderScope(scope=f"user_{uuid.uuid4().hex[:8]}")

    async with (
        AzureCliCredential() as credential,
        AIProjectClient(endpoint=settings.azure_ai_project_endpoint, credential=credential) as project_client,
    ):
        memory_provider = FoundryMemoryProvider(
            project_client=project_client,
            memory_store_name=settings.azure_ai_memory_store_name,
            scope=scope,
            update_delay=0,
        )
        created = await memory_provider.ensure_memory_store_created(
            chat_model=settings.azure_ai_memory_chat_model_deployment_name,
            embedding_model=settings.azure_ai_memory_embedding_model_deployment_name,
            description="Memories of the travel assistant sample",
        )
        print(f"Memory store created: {created}\n")

        async with QuickstartAgent(
            chat_client=AzureAIClient(project_client=project_client),
            name="TravelAssistant",
            instructions="You are a friendly travel assistant. Use known memories about the user when responding.",
            context_providers=memory_provider,
        ) as agent:
            try:
                for query in [
                    "Hi! I'm Taylor. I'm planning a hiking trip to Patagonia in November.",
                    "I'm travelling with my sister and we love finding scenic viewpoints.",
                ]:
                    print(f"User: {query}")
                    result = await agent.run(query, thread=agent.get_new_thread())
                    print(f"Agent: {result}\n")

                # Allow time for the memories to be extracted
                await asyncio.sleep(5)

                query = "What do you already know about my upcoming trip?"
                print(f"User: {query}")
                result = await agent.run(query, thread=agent.get_new_thread())
                print(f"Agent: {result}\n")

                # The state of the provider can be kept to continue with the same scope later on.
                state = memory_provider.serialize()
                restored = FoundryMemoryProvider.deserialize(
                    state,
                    project_client=project_client,
                    memory_store_name=memory_provider.memory_store_name,
                )
                print(f"Restored scope: {restored.scope.scope}\n")
            finally:
                await memory_provider.ensure_stored_memories_deleted()
                await agent.delete()


if __name__ == "__main__":
    asyncio.run(main())
