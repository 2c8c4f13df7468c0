# Copyright (c) Microsoft. All rights reserved.

import asyncio
from pathlib import Path

from agent_framework import ChatMessage, DataContent, Role, TextContent
from agent_framework.azure import AzureAIClient
from agent_quickstart import HostedComputerUseTool, QuickstartAgent, SampleSettings, print_response
from azure.identity.aio import AzureCliCredential

"""
Azure AI Agent with Computer Use Example

This sample demonstrates the computer use tool hosted by the service. The model looks at a
screenshot of the screen and answers with the actions to perform on it, clicks and key presses
for instance; performing them and sending the next screenshot is left to the caller.

Prerequisites:
1. Set AZURE_AI_PROJECT_ENDPOINT and AZURE_AI_MODEL_DEPLOYMENT_NAME environment variables,
    the deployment must be a computer use model, computer-use-preview for instance.
2. Optionally set COMPUTER_USE_SCREENSHOT_PATH to a PNG screenshot of the screen to operate.
"""


def build_request(query: str, screenshot_path: str | None) -> ChatMessage:
    contents: list[TextContent | DataContent] = [TextContent(text=query)]
    if screenshot_path:
        contents.append(DataContent(data=Path(screenshot_path).read_bytes(), media_type="image/png"))
    return ChatMessage(role=Role.USER, contents=contents)


async def main() -> None:
    settings = SampleSettings()

    async with (
        AzureCliCredential() as credential,
        QuickstartAgent(
            chat_client=AzureAIClient(async_credential=credential),
            name="ComputerUseAgent",
            instructions="""You are a computer automation assistant.
            Be direct and efficient. When you reach the search results page, read and describe the actions
            needed to open the first result.""",
            tools=HostedComputerUseTool(environment="windows", display_width=1026, display_height=769),
        ) as agent,
    ):
        try:
            query = "I need you to help me search for 'OpenAI news'. Please type 'OpenAI news' and submit the search."
            print(f"User: {query}")
            response = await agent.run(build_request(query, settings.computer_use_screenshot_path))
            print_response(response, agent_name="Agent")

            # The requested actions come back as contents the framework does not parse into text.
            for message in response.messages:
                for content in message.contents:
                    if not isinstance(content, TextContent):
                        print(f"Requested action: {content.raw_representation}")
        finally:
            await agent.delete()


if __name__ == "__main__":
    asyncio.run(main())
