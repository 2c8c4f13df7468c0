# Copyright (c) Microsoft. All rights reserved.

import asyncio

from agent_framework.azure import AzureAIClient
from agent_framework.exceptions import ServiceContentFilterException
from agent_quickstart import QuickstartAgent, RemoteCallError, SampleSettings
from azure.ai.projects.aio import AIProjectClient
from azure.ai.projects.models import PromptAgentDefinition, RaiConfig
from azure.identity.aio import AzureCliCredential

"""
Azure AI Agent with Content Filtering Example

This sample demonstrates an agent version created with a Responsible AI (RAI) policy. The
version is created up front through the project client, the agent then runs it by name and
version. A request rejected by the policy raises a RemoteCallError wrapping the content
filter error of the service.

Prerequisites:
1. Set AZURE_AI_PROJECT_ENDPOINT and AZURE_AI_MODEL_DEPLOYMENT_NAME environment variables.
2. Set AZURE_AI_RAI_POLICY_NAME to the full resource id of the policy, in the format
    /subscriptions/{subscription}/resourceGroups/{group}/providers/Microsoft.CognitiveServices
    /accounts/{account}/raiPolicies/{policy} (on one line).
"""


async def main() -> None:
    settings = SampleSettings()
    settings.require("azure_ai_project_endpoint", "azure_ai_model_deployment_name", "azure_ai_rai_policy_name")

    async with (
        AzureCliCredential() as credential,
        AIProjectClient(endpoint=settings.azure_ai_project_endpoint, credential=credential) as project_client,
    ):
        created = await project_client.agents.create_version(
            agent_name="ContentFilteredAgent",
            definition=PromptAgentDefinition(
                model=settings.azure_ai_model_deployment_name,
                instructions="You are a helpful assistant that provides safe and appropriate responses.",
                rai_config=RaiConfig(rai_policy_name=settings.azure_ai_rai_policy_name),
            ),
        )
        try:
            agent = QuickstartAgent(
                chat_client=AzureAIClient(
                    project_client=project_client,
                    agent_name=created.name,
                    agent_version=created.version,
                ),
            )
            print(f"RAI Policy: {settings.azure_ai_rai_policy_name}\n")
            for query in ["What is the capital of France?", "Tell me about responsible AI practices."]:
                print(f"User: {query}")
                try:
                    result = await agent.run(query)
                    print(f"Agent: {result}\n")
                except RemoteCallError as ex:
                    # Whether the filter triggers depends on the configuration of the policy.
                    if not isinstance(ex.inner_exception, ServiceContentFilterException):
                        raise
                    print(f"Content filter triggered: {ex}\n")
        finally:
            # The version was created here, the agent only deletes the versions it creates itself.
            await project_client.agents.delete_version(agent_name=created.name, agent_version=created.version)


if __name__ == "__main__":
    asyncio.run(main())
