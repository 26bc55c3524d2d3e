"""
Prompts Module - LLM prompt templates.

- event_ranking_system.md: instructions for semantic re-ranking ({limit})
- event_ranking.md: trend plus numbered event list ({title}, {summary}, {category}, {events_list})
"""
from ._loader import PromptLoader, get_prompt, get_prompt_loader

__all__ = [
    "PromptLoader",
    "get_prompt",
    "get_prompt_loader",
]
