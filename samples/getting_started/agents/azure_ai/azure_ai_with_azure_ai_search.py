# Copyright (c) Microsoft. All rights reserved.

import asyncio

from agent_framework.azure import AzureAIClient
from agent_quickstart import HostedAzureAISearchTool, QuickstartAgent, SampleSettings, print_response
from azure.identity.aio import AzureCliCredential

"""
Azure AI Agent with Azure AI Search Example

This sample demonstrates usage of AzureAIClient with Azure AI Search
to search through indexed data and answer user questions about it, printing the
citations the service attaches to the answer.

Prerequisites:
1. Set AZURE_AI_PROJECT_ENDPOINT and AZURE_AI_MODEL_DEPLOYMENT_NAME environment variables.
2. Ensure you have an Azure AI Search connection configured in your Azure AI project
    and set AI_SEARCH_PROJECT_CONNECTION_ID and AI_SEARCH_INDEX_NAME environment variable.
"""


async def main() -> None:
    settings = SampleSettings()
    settings.require("ai_search_project_connection_id", "ai_search_index_name")

    async with (
        AzureCliCredential() as credential,
        QuickstartAgent(
            chat_client=AzureAIClient(async_credential=credential),
            name="SearchAgent",
            instructions="""You are a helpful assistant. You must always provide citations for
            answers using the tool and render them as: `[message_idx:search_idx†source]`.""",
            tools=HostedAzureAISearchTool(
                project_connection_id=settings.ai_search_project_connection_id,
                index_name=settings.ai_search_index_name,
                # For query_type=vector, ensure your index has a field with vectorized data.
                query_type="simple",
            ),
        ) as agent,
    ):
        try:
            query = "What information do you have in the search index?"
            print(f"User: {query}")
            print_response(await agent.run(query), agent_name="Agent")
        finally:
            await agent.delete()


if __name__ == "__main__":
    asyncio.run(main())
