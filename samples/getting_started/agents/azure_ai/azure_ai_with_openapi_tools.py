# Copyright (c) Microsoft. All rights reserved.

import asyncio
from typing import Any

from agent_framework.azure import AzureAIClient
from agent_quickstart import HostedOpenAPITool, QuickstartAgent
from azure.identity.aio import AzureCliCredential

"""
Azure AI Agent with OpenAPI Tools Example

This sample demonstrates an agent that calls the REST Countries API through an
OpenAPI specification, with anonymous authentication.

Prerequisites:
1. Set AZURE_AI_PROJECT_ENDPOINT and AZURE_AI_MODEL_DEPLOYMENT_NAME environment variables.
2. Run `az login` to authenticate.
"""

COUNTRIES_OPENAPI_SPEC: dict[str, Any] = {
    "openapi": "3.1.0",
    "info": {
        "title": "REST Countries API",
        "description": "Retrieve information about countries by currency code",
        "version": "v3.1",
    },
    "servers": [{"url": "https://restcountries.com/v3.1"}],
    "paths": {
        "/currency/{currency}": {
            "get": {
                "description": "Get countries that use a specific currency code (e.g., USD, EUR, GBP)",
                "operationId": "GetCountriesByCurrency",
                "parameters": [
                    {
                        "name": "currency",
                        "in": "path",
                        "description": "Currency code (e.g., USD, EUR, GBP)",
                        "required": True,
                        "schema": {"type": "string"},
                    }
                ],
                "responses": {
                    "200": {
                        "description": "Successful response with list of countries",
                        "content": {
                            "application/json": {"schema": {"type": "array", "items": {"type": "object"}}}
                        },
                    },
                    "404": {"description": "No countries found for the currency"},
                },
            }
        }
    },
}


async def main() -> None:
    async with (
        AzureCliCredential() as credential,
        QuickstartAgent(
            chat_client=AzureAIClient(async_credential=credential),
            name="OpenAPIToolsAgent",
            instructions=(
                "You are a helpful assistant that can use the countries API to retrieve information "
                "about countries by their currency code."
            ),
            tools=HostedOpenAPITool(
                name="get_countries",
                spec=COUNTRIES_OPENAPI_SPEC,
                description="Retrieve information about countries by currency code",
            ),
        ) as agent,
    ):
        try:
            query = "What countries use the Euro (EUR) as their currency? Please list them."
            print(f"User: {query}")
            result = await agent.run(query)
            print(f"Agent: {result}\n")
        finally:
            await agent.delete()


if __name__ == "__main__":
    asyncio.run(main())
