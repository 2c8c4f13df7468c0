# Copyright (c) Microsoft. All rights reserved.

import asyncio

from agent_quickstart import create_agent, print_response, print_stream

"""
Anthropic Chat Agent Example

This sample demonstrates an agent on an Anthropic chat model, with a blocking call
and with streaming output.

Prerequisites:
Set ANTHROPIC_API_KEY and ANTHROPIC_CHAT_MODEL_ID environment variables.
"""


async def non_streaming_example() -> None:
    print("=== Non-streaming Response Example ===")

    agent = create_agent("anthropic", name="Joker", instructions="You are good at telling jokes.")

    query = "Tell me a joke about a pirate."
    print(f"User: {query}")
    print_response(await agent.run(query), agent_name="Agent")
    print()


async def streaming_example() -> None:
    print("=== Streaming Response Example ===")

    agent = create_agent("anthropic", name="Joker", instructions="You are good at telling jokes.", max_tokens=512)

    query = "Tell me a joke about a pirate."
    print(f"User: {query}")
    await print_stream(agent.run_stream(query), agent_name="Agent")
    print()


async def main() -> None:
    print("=== Anthropic Example ===")

    await non_streaming_example()
    await streaming_example()


if __name__ == "__main__":
    asyncio.run(main())
