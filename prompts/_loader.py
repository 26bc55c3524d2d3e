"""
Prompt Loader - Markdown prompt templates with {placeholder} fields.

Templates sit next to this module as <name>.md. They are read once per
loader and filled with str.format, so literal braces must be doubled.
"""
from functools import lru_cache
from pathlib import Path
from string import Formatter
from typing import Any, Dict, Optional

from loguru import logger

PROMPTS_DIR = Path(__file__).parent


class PromptLoader:
    """
    Reads and fills prompt templates.

    Example:
        loader = PromptLoader()
        system = loader.format("event_ranking_system", limit=8)
    """

    def __init__(self, prompts_dir: Optional[Path] = None):
        self.prompts_dir = Path(prompts_dir or PROMPTS_DIR)
        self._templates: Dict[str, str] = {}

    def get(self, prompt_name: str) -> str:
        """Raw template text. Raises FileNotFoundError for unknown names."""
        template = self._templates.get(prompt_name)
        if template is not None:
            return template

        path = self.prompts_dir / f"{prompt_name}.md"
        if not path.is_file():
            available = ", ".join(self.list_prompts()) or "none"
            raise FileNotFoundError(f"No prompt '{prompt_name}' in {self.prompts_dir} (available: {available})")

        template = path.read_text(encoding="utf-8")
        self._templates[prompt_name] = template
        logger.debug(f"Loaded prompt {prompt_name} ({len(template)} chars)")
        return template

    def fields(self, prompt_name: str) -> set[str]:
        """Placeholder names used by a template."""
        return {
            name for _, name, _, _ in Formatter().parse(self.get(prompt_name))
            if name
        }

    def format(self, prompt_name: str, **kwargs: Any) -> str:
        """
        Fill a template.

        Raises:
            ValueError: a placeholder has no value
        """
        missing = self.fields(prompt_name) - kwargs.keys()
        if missing:
            raise ValueError(f"Prompt '{prompt_name}' is missing values for: {', '.join(sorted(missing))}")
        return self.get(prompt_name).format(**kwargs)

    def list_prompts(self) -> list[str]:
        return sorted(p.stem for p in self.prompts_dir.glob("*.md"))


@lru_cache(maxsize=1)
def get_prompt_loader() -> PromptLoader:
    """Shared loader for the bundled templates."""
    return PromptLoader()


def get_prompt(prompt_name: str, **kwargs: Any) -> str:
    """Template text, filled when values are given."""
    loader = get_prompt_loader()
    return loader.format(prompt_name, **kwargs) if kwargs else loader.get(prompt_name)
