# Copyright (c) Microsoft. All rights reserved.

import asyncio
import os

from agent_framework.azure import AzureAIClient
from agent_quickstart import HostedBrowserAutomationTool, QuickstartAgent, print_stream
from azure.identity.aio import AzureCliCredential

"""
Azure AI Agent with Browser Automation Example

This sample demonstrates an agent that drives a browser hosted by the service,
streaming the answer as it is produced.

Prerequisites:
1. Set AZURE_AI_PROJECT_ENDPOINT and AZURE_AI_MODEL_DEPLOYMENT_NAME environment variables.
2. Connect a Playwright workspace to your project and set BROWSER_AUTOMATION_PROJECT_CONNECTION_ID.
"""


async def main() -> None:
    async with (
        AzureCliCredential() as credential,
        QuickstartAgent(
            chat_client=AzureAIClient(async_credential=credential),
            name="BrowserAutomationAgent",
            instructions="""You are an Agent helping with browser automation tasks.
            You can answer questions, provide information, and assist with various tasks
            related to web browsing using the Browser Automation tool available to you.""",
            tools=HostedBrowserAutomationTool(
                project_connection_id=os.environ["BROWSER_AUTOMATION_PROJECT_CONNECTION_ID"],
            ),
        ) as agent,
    ):
        try:
            query = """Your goal is to report the percent of Microsoft year-to-date stock price change.
            To do that, go to the website finance.yahoo.com.
            At the top of the page, you will find a search bar.
            Enter the value 'MSFT', to get information about the Microsoft stock price.
            At the top of the resulting page you will see a default chart of Microsoft stock price.
            Click on 'YTD' at the top of that chart, and report the percent value that shows up just below it."""
            print(f"User: {query}")
            await print_stream(agent.run_stream(query), agent_name="Agent")
        finally:
            await agent.delete()


if __name__ == "__main__":
    asyncio.run(main())
