# Copyright (c) Microsoft. All rights reserved.

import asyncio
from random import randint
from typing import Annotated

from agent_framework.openai import OpenAIResponsesClient
from agent_quickstart import QuickstartAgent, print_stream
from pydantic import Field

"""
OpenAI Responses Client Basic Example

This sample demonstrates an agent on the OpenAI Responses API with a function tool,
and an agent driven by its instructions alone, without any user message.

Prerequisites:
Set OPENAI_API_KEY and OPENAI_RESPONSES_MODEL_ID environment variables.
"""


def get_weather(
    location: Annotated[str, Field(description="The location to get the weather for.")],
) -> str:
    """Get the weather for a given location."""
    conditions = ["sunny", "cloudy", "rainy", "stormy"]
    return f"The weather in {location} is {conditions[randint(0, 3)]} with a high of {randint(10, 30)}°C."


async def tools_example() -> None:
    print("=== Function Tool Example ===")

    agent = QuickstartAgent(
        chat_client=OpenAIResponsesClient(),
        name="WeatherAgent",
        instructions="You are a helpful weather agent.",
        tools=get_weather,
    )

    query = "What's the weather like in Seattle?"
    print(f"User: {query}")
    await print_stream(agent.run_stream(query), agent_name="Agent")
    print()


async def instructions_only_example() -> None:
    print("=== No User Message Example ===")

    agent = QuickstartAgent(
        chat_client=OpenAIResponsesClient(),
        name="ComputerAgent",
        instructions="Always respond with 'Computer says no', even if there was no user input.",
    )

    result = await agent.run()
    print(f"Agent: {result}\n")


async def main() -> None:
    print("=== Basic OpenAI Responses Client Agent Example ===\n")

    await tools_example()
    await instructions_only_example()


if __name__ == "__main__":
    asyncio.run(main())
