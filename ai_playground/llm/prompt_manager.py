"""
Prompt Manager

Holds prompt templates and the current working prompt.
"""
import operator
from typing import Iterator, List, Optional

from loguru import logger

from ..components import AIComponent
from ..console import Console
from .errors import Sentinel

DEFAULT_TEMPLATES = (
    "Explain {topic} in simple terms",
    "Write a {style} story about {subject}",
    "Analyze the following: {content}",
    "Generate code for {language} to {task}",
    "Summarize the key points of {text}",
    "Translate {text} to {language}",
    "Create a {type} plan for {goal}",
    "Debug this {language} code: {code}",
)

class PromptManager(AIComponent):
    """Manages prompt templates and the current prompt.

    Templates are opaque strings. Placeholders such as ``{topic}`` are kept
    as written and never filled in. Templates can be appended but not removed.
    """

    def __init__(self, console: Optional[Console] = None):
        """Initialize the prompt manager with the default templates."""
        super().__init__("Prompt Manager", "Manages and templates prompts", console)
        self.templates: List[str] = list(DEFAULT_TEMPLATES)
        self.current_prompt = ""

    @property
    def template_count(self) -> int:
        return len(self.templates)

    def initialize(self) -> None:
        """Report how many templates are loaded."""
        self.notify(f"Initializing Prompt Manager with {self.template_count} templates")
        logger.info(f"Prompt Manager ready with {self.template_count} templates")

    def process(self) -> None:
        """Show the current prompt, if any."""
        if not self.current_prompt:
            self.notify("No current prompt set")
            return
        self.notify(f"Current prompt: {self.current_prompt}")

    def set_prompt(self, prompt: str) -> None:
        """Set the current prompt (may be empty)."""
        self.current_prompt = prompt

    def get_template(self, index: int) -> str:
        """Get a template by position.

        Args:
            index: Zero-based template index

        Returns:
            The template, or ``"Invalid template index"`` if ``index`` is out
            of range (negative indices are never wrapped around)
        """
        if isinstance(index, bool):
            return Sentinel.INVALID_TEMPLATE_INDEX.value

        try:
            position = operator.index(index)
        except TypeError:
            return Sentinel.INVALID_TEMPLATE_INDEX.value

        if 0 <= position < len(self.templates):
            return self.templates[position]
        return Sentinel.INVALID_TEMPLATE_INDEX.value

    def add_template(self, template: str) -> bool:
        """Append a template.

        Args:
            template: Template string; empty strings are rejected

        Returns:
            True if the template was stored
        """
        if not template:
            self.notify("Cannot add empty template")
            logger.warning("Rejected empty prompt template")
            return False

        self.templates.append(template)
        self.notify(f"Added template: {template}")
        logger.debug(f"Template count is now {self.template_count}")
        return True

    def all_templates(self) -> List[str]:
        """Return a copy of every stored template, in order."""
        return list(self.templates)

    def __len__(self) -> int:
        """Number of stored templates."""
        return len(self.templates)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self.templates))
