# Copyright (c) Microsoft. All rights reserved.

import asyncio
from typing import Any

from agent_framework import AgentRunResponse, AgentThread, ChatMessage, HostedMCPTool
from agent_framework.azure import AzureAIClient
from agent_quickstart import QuickstartAgent
from azure.identity.aio import AzureCliCredential

"""
Azure AI Agent with Hosted MCP Example

This sample demonstrates integrating hosted Model Context Protocol (MCP) tools with Azure AI Agent,
with and without approvals of the tool calls.

Prerequisites:
1. Set AZURE_AI_PROJECT_ENDPOINT and AZURE_AI_MODEL_DEPLOYMENT_NAME environment variables.
2. Run `az login` to authenticate.
"""


async def handle_approvals_with_thread(query: str, agent: QuickstartAgent, thread: AgentThread) -> AgentRunResponse:
    """The thread keeps the previous responses, the approvals are sent on the next run."""
    result = await agent.run(query, thread=thread)
    while len(result.user_input_requests) > 0:
        new_input: list[Any] = []
        for user_input_needed in result.user_input_requests:
            print(
                f"User Input Request for function from {agent.name}: {user_input_needed.function_call.name}"
                f" with arguments: {user_input_needed.function_call.arguments}"
            )
            user_approval = input("Approve function call? (y/n): ")
            new_input.append(
                ChatMessage(
                    role="user",
                    contents=[user_input_needed.create_response(user_approval.lower() == "y")],
                )
            )
        result = await agent.run(new_input, thread=thread)
    return result


async def run_hosted_mcp_without_approval() -> None:
    """Example showing MCP Tools without approval."""
    print("=== MCP without approvals ===")

    async with (
        AzureCliCredential() as credential,
        QuickstartAgent(
            chat_client=AzureAIClient(async_credential=credential),
            name="MyLearnDocsAgent",
            instructions="You are a helpful assistant that can help with Microsoft documentation questions.",
            tools=HostedMCPTool(
                name="Microsoft Learn MCP",
                url="https://learn.microsoft.com/api/mcp",
                approval_mode="never_require",
            ),
        ) as agent,
    ):
        try:
            query = "How to create an Azure storage account using az cli?"
            print(f"User: {query}")
            result = await agent.run(query)
            print(f"{agent.name}: {result}\n")
        finally:
            await agent.delete()


async def run_hosted_mcp_with_approval_and_thread() -> None:
    """Example showing MCP Tools with approvals using a thread."""
    print("=== MCP with approvals and with thread ===")

    async with (
        AzureCliCredential() as credential,
        QuickstartAgent(
            chat_client=AzureAIClient(async_credential=credential),
            name="MyApiSpecsAgent",
            instructions="You are a helpful agent that can use MCP tools to assist users.",
            tools=HostedMCPTool(
                name="api-specs",
                url="https://gitmcp.io/Azure/azure-rest-api-specs",
                approval_mode="always_require",
            ),
        ) as agent,
    ):
        try:
            thread = agent.get_new_thread()
            query = "Please summarize the Azure REST API specifications Readme"
            print(f"User: {query}")
            result = await handle_approvals_with_thread(query, agent, thread)
            print(f"{agent.name}: {result}\n")
        finally:
            await agent.delete()


async def main() -> None:
    print("=== Azure AI Agent with Hosted MCP Tools Example ===\n")

    await run_hosted_mcp_without_approval()
    await run_hosted_mcp_with_approval_and_thread()


if __name__ == "__main__":
    asyncio.run(main())
