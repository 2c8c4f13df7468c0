# Copyright (c) Microsoft. All rights reserved.

import asyncio
from typing import Annotated, Any

from agent_framework import ChatMessage, ai_function
from agent_framework.azure import AzureAIClient
from agent_quickstart import QuickstartAgent
from azure.identity.aio import AzureCliCredential
from pydantic import Field

"""
Azure AI Agent with Function Approvals Example

This sample demonstrates a function that requires the approval of the user before it
runs. The agent returns approval requests, the answers are sent back on the next run.

Prerequisites:
1. Set AZURE_AI_PROJECT_ENDPOINT and AZURE_AI_MODEL_DEPLOYMENT_NAME environment variables.
2. Run `az login` to authenticate.
"""


@ai_function(approval_mode="always_require")
def get_weather(
    location: Annotated[str, Field(description="The location to get the weather for.")],
) -> str:
    """Get the weather for a given location."""
    return f"The weather in {location} is cloudy with a high of 15°C."


async def main() -> None:
    print("=== Azure AI Agent with Function Approvals Example ===\n")

    async with (
        AzureCliCredential() as credential,
        QuickstartAgent(
            chat_client=AzureAIClient(async_credential=credential),
            name="WeatherAssistant",
            instructions="You are a helpful assistant that can get weather information.",
            tools=get_weather,
        ) as agent,
    ):
        try:
            thread = agent.get_new_thread()
            query = "What is the weather like in Amsterdam?"
            print(f"User: {query}")
            result = await agent.run(query, thread=thread)

            while result.user_input_requests:
                new_inputs: list[Any] = []
                for request in result.user_input_requests:
                    print(
                        f"Approval requested for {request.function_call.name}"
                        f" with arguments: {request.function_call.arguments}"
                    )
                    approved = input("Approve function call? (y/n): ").lower() == "y"
                    new_inputs.append(ChatMessage(role="user", contents=[request.create_response(approved)]))
                result = await agent.run(new_inputs, thread=thread)

            print(f"Agent: {result}\n")
        finally:
            await agent.delete()


if __name__ == "__main__":
    asyncio.run(main())
