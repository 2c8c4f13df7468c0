# Copyright (c) Microsoft. All rights reserved.

import asyncio
import os

from agent_framework.azure import AzureAIClient
from agent_quickstart import HostedFabricTool, QuickstartAgent
from azure.identity.aio import AzureCliCredential

"""
Azure AI Agent with Microsoft Fabric Example

This sample demonstrates an agent that answers questions with a Microsoft Fabric data agent.

Prerequisites:
1. Set AZURE_AI_PROJECT_ENDPOINT and AZURE_AI_MODEL_DEPLOYMENT_NAME environment variables.
2. Set FABRIC_PROJECT_CONNECTION_ID to the Fabric connection of your project.
"""


async def main() -> None:
    async with (
        AzureCliCredential() as credential,
        QuickstartAgent(
            chat_client=AzureAIClient(async_credential=credential),
            name="FabricAgent",
            instructions="You are a helpful assistant.",
            tools=HostedFabricTool(project_connection_id=os.environ["FABRIC_PROJECT_CONNECTION_ID"]),
        ) as agent,
    ):
        try:
            query = "Tell me about sales records"
            print(f"User: {query}")
            result = await agent.run(query)
            print(f"Agent: {result}\n")
        finally:
            await agent.delete()


if __name__ == "__main__":
    asyncio.run(main())
