# Copyright (c) Microsoft. All rights reserved.

from collections.abc import AsyncIterable, Iterable
from typing import Any

from agent_framework import AgentRunResponse, AgentRunResponseUpdate, CitationAnnotation

__all__ = ["format_citation", "get_citations", "print_response", "print_stream"]


def get_citations(items: AgentRunResponse | Iterable[AgentRunResponseUpdate]) -> list[CitationAnnotation]:
    """Collect the citations attached to the contents of a response or of streamed updates.

    The same source cited more than once is returned once, in the order it was first cited.
    """
    carriers: Iterable[Any] = items.messages if isinstance(items, AgentRunResponse) else items
    citations: list[CitationAnnotation] = []
    seen: set[tuple[str | None, str | None, str | None]] = set()
    for carrier in carriers:
        for content in carrier.contents:
            for annotation in content.annotations or []:
                if not isinstance(annotation, CitationAnnotation):
                    continue
                key = (annotation.title, annotation.url, annotation.file_id)
                if key not in seen:
                    seen.add(key)
                    citations.append(annotation)
    return citations


def format_citation(citation: CitationAnnotation) -> str:
    source = citation.url or citation.file_id or "unknown source"
    return f"{citation.title}: {source}" if citation.title else source


def _print_citations(citations: list[CitationAnnotation]) -> None:
    if not citations:
        return
    print("Citations:")
    for citation in citations:
        print(f"  - {format_citation(citation)}")


def print_response(response: AgentRunResponse, *, agent_name: str | None = None) -> None:
    """Print the text of a response followed by its citations."""
    prefix = f"{agent_name}: " if agent_name else ""
    print(f"{prefix}{response.text}")
    _print_citations(get_citations(response))


async def print_stream(updates: AsyncIterable[AgentRunResponseUpdate], *, agent_name: str | None = None) -> str:
    """Print the text fragments of a streamed response as they arrive, then the citations.

    Returns:
        The full text of the response.
    """
    if agent_name:
        print(f"{agent_name}: ", end="", flush=True)
    received: list[AgentRunResponseUpdate] = []
    fragments: list[str] = []
    async for update in updates:
        received.append(update)
        if update.text:
            fragments.append(update.text)
            print(update.text, end="", flush=True)
    print()
    _print_citations(get_citations(received))
    return "".join(fragments)
