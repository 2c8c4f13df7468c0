# Copyright (c) Microsoft. All rights reserved.

import asyncio
import os

from agent_framework.azure import AzureAIClient
from agent_quickstart import HostedSharePointTool, QuickstartAgent, print_response
from azure.identity.aio import AzureCliCredential

"""
Azure AI Agent with SharePoint Example

This sample demonstrates an agent grounded on the documents of a SharePoint site.

Prerequisites:
1. Set AZURE_AI_PROJECT_ENDPOINT and AZURE_AI_MODEL_DEPLOYMENT_NAME environment variables.
2. Set SHAREPOINT_PROJECT_CONNECTION_ID to the SharePoint connection of your project.
"""


async def main() -> None:
    async with (
        AzureCliCredential() as credential,
        QuickstartAgent(
            chat_client=AzureAIClient(async_credential=credential),
            name="SharePointAgent",
            instructions="""You are a helpful agent that can use SharePoint tools to assist users.
            Use the available SharePoint tools to answer questions and perform tasks.""",
            tools=HostedSharePointTool(project_connection_id=os.environ["SHAREPOINT_PROJECT_CONNECTION_ID"]),
        ) as agent,
    ):
        try:
            query = "List the documents available in SharePoint"
            print(f"User: {query}")
            print_response(await agent.run(query), agent_name="Agent")
        finally:
            await agent.delete()


if __name__ == "__main__":
    asyncio.run(main())
