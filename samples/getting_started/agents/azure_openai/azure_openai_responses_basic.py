# Copyright (c) Microsoft. All rights reserved.

import asyncio

from agent_framework.azure import AzureOpenAIResponsesClient
from agent_quickstart import QuickstartAgent, print_stream
from azure.identity.aio import AzureCliCredential

"""
Azure OpenAI Responses Client Basic Example

This sample demonstrates a Joker agent on an Azure OpenAI Responses deployment,
authenticated with Entra ID through the Azure CLI credential.

Prerequisites:
1. Set AZURE_OPENAI_ENDPOINT and AZURE_OPENAI_RESPONSES_DEPLOYMENT_NAME environment variables.
2. Run `az login`, or set AZURE_OPENAI_API_KEY to authenticate with a key instead.
"""


async def main() -> None:
    print("=== Azure OpenAI Responses Client Agent Example ===\n")

    async with AzureCliCredential() as credential:
        agent = QuickstartAgent(
            chat_client=AzureOpenAIResponsesClient(credential=credential),
            name="Joker",
            instructions="You are good at telling jokes.",
        )

        query = "Tell me a joke about a pirate."
        print(f"User: {query}")
        result = await agent.run(query)
        print(f"Agent: {result}\n")

        print(f"User: {query}")
        await print_stream(agent.run_stream(query), agent_name="Agent")


if __name__ == "__main__":
    asyncio.run(main())
