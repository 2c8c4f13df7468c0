# Copyright (c) Microsoft. All rights reserved.

import asyncio
import os

from agent_framework.azure import AzureAIClient
from agent_quickstart import HostedBingCustomSearchTool, QuickstartAgent, print_response
from azure.identity.aio import AzureCliCredential

"""
Azure AI Agent with Bing Custom Search Example

This sample demonstrates an agent grounded on a Bing Custom Search instance.

Prerequisites:
1. Set AZURE_AI_PROJECT_ENDPOINT and AZURE_AI_MODEL_DEPLOYMENT_NAME environment variables.
2. Set BING_CUSTOM_SEARCH_PROJECT_CONNECTION_ID and BING_CUSTOM_SEARCH_INSTANCE_NAME
    to the connection and the configuration name of your Bing Custom Search resource.
"""


async def main() -> None:
    async with (
        AzureCliCredential() as credential,
        QuickstartAgent(
            chat_client=AzureAIClient(async_credential=credential),
            name="BingCustomSearchAgent",
            instructions="""You are a helpful agent that can use Bing Custom Search tools to assist users.
            Use the available Bing Custom Search tools to answer questions and perform tasks.""",
            tools=HostedBingCustomSearchTool(
                project_connection_id=os.environ["BING_CUSTOM_SEARCH_PROJECT_CONNECTION_ID"],
                instance_name=os.environ["BING_CUSTOM_SEARCH_INSTANCE_NAME"],
            ),
        ) as agent,
    ):
        try:
            query = "Search for the latest news about Microsoft AI"
            print(f"User: {query}")
            print_response(await agent.run(query), agent_name="Agent")
        finally:
            await agent.delete()


if __name__ == "__main__":
    asyncio.run(main())
