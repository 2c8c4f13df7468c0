# Copyright (c) Microsoft. All rights reserved.

import asyncio
from typing import Annotated

from agent_framework import ai_function
from agent_framework.azure import AzureAIClient
from agent_quickstart import QuickstartAgent
from azure.identity.aio import AzureCliCredential
from pydantic import Field

"""
Azure AI Agent with Function Tools Example

This sample demonstrates a menu agent whose local functions are called by the model,
and a thread that carries the conversation across follow-up questions.

Prerequisites:
1. Set AZURE_AI_PROJECT_ENDPOINT and AZURE_AI_MODEL_DEPLOYMENT_NAME environment variables.
2. Run `az login` to authenticate.
"""


@ai_function(name="GetSpecials", description="Provides a list of specials from the menu.")
def get_specials() -> str:
    return """
        Special Soup: Clam Chowder
        Special Salad: Cobb Salad
        Special Drink: Chai Tea
        """


@ai_function(name="GetItemPrice", description="Provides the price of the requested menu item.")
def get_item_price(
    menu_item: Annotated[str, Field(description="The name of the menu item.")],
) -> str:
    return "$9.99"


async def main() -> None:
    print("=== Azure AI Agent with Function Tools Example ===\n")

    async with (
        AzureCliCredential() as credential,
        QuickstartAgent(
            chat_client=AzureAIClient(async_credential=credential),
            name="HostAgent",
            instructions="Answer questions about the menu.",
            tools=[get_specials, get_item_price],
        ) as agent,
    ):
        try:
            thread = agent.get_new_thread()
            for query in [
                "What is the special soup and its price?",
                "What is the special drink and its price?",
                "What is the special salad?",
            ]:
                print(f"User: {query}")
                result = await agent.run(query, thread=thread)
                print(f"Agent: {result}\n")
        finally:
            await agent.delete()


if __name__ == "__main__":
    asyncio.run(main())
