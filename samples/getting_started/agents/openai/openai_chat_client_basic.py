# Copyright (c) Microsoft. All rights reserved.

import asyncio

from agent_framework.openai import OpenAIChatClient
from agent_quickstart import QuickstartAgent, print_stream

"""
OpenAI Chat Client Basic Example

This sample demonstrates a Joker agent on the OpenAI Chat Completions API, invoked
once with a blocking call and once with streaming output.

Prerequisites:
Set OPENAI_API_KEY and OPENAI_CHAT_MODEL_ID environment variables.
"""


async def non_streaming_example(agent: QuickstartAgent) -> None:
    print("=== Non-streaming Response Example ===")

    query = "Tell me a joke about a pirate."
    print(f"User: {query}")
    result = await agent.run(query)
    print(f"Agent: {result}\n")


async def streaming_example(agent: QuickstartAgent) -> None:
    print("=== Streaming Response Example ===")

    query = "Tell me a joke about a pirate."
    print(f"User: {query}")
    await print_stream(agent.run_stream(query), agent_name="Agent")
    print()


async def main() -> None:
    print("=== Basic OpenAI Chat Client Agent Example ===\n")

    async with QuickstartAgent(
        chat_client=OpenAIChatClient(),
        name="Joker",
        instructions="You are good at telling jokes.",
    ) as agent:
        await non_streaming_example(agent)
        await streaming_example(agent)


if __name__ == "__main__":
    asyncio.run(main())
