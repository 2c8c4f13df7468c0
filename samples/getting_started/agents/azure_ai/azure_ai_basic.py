# Copyright (c) Microsoft. All rights reserved.

import asyncio

from agent_framework.azure import AzureAIClient
from agent_quickstart import QuickstartAgent, print_stream
from azure.identity.aio import AzureCliCredential

"""
Azure AI Agent Basic Example

This sample demonstrates the creation of a Foundry agent version, a blocking and a
streaming invocation, and the deletion of the agent version afterwards.

Prerequisites:
1. Set AZURE_AI_PROJECT_ENDPOINT and AZURE_AI_MODEL_DEPLOYMENT_NAME environment variables.
2. Run `az login` to authenticate.
"""


async def main() -> None:
    print("=== Azure AI Agent Basic Example ===\n")

    # For authentication, run `az login` command in terminal or replace AzureCliCredential with preferred
    # authentication option.
    async with (
        AzureCliCredential() as credential,
        QuickstartAgent(
            chat_client=AzureAIClient(async_credential=credential),
            name="JokerAgent",
            instructions="You are good at telling jokes.",
        ) as agent,
    ):
        try:
            query = "Tell me a joke about a pirate."
            print(f"User: {query}")
            result = await agent.run(query)
            print(f"Agent: {result}\n")

            print(f"User: {query}")
            await print_stream(agent.run_stream(query), agent_name="Agent")
        finally:
            # The agent version is created on the first run, cleanup never masks the outcome of the runs.
            await agent.delete()


if __name__ == "__main__":
    asyncio.run(main())
