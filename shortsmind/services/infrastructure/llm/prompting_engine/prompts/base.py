"""
Base prompt template class and utilities.
"""

from dataclasses import dataclass
from string import Formatter
from typing import FrozenSet


@dataclass(frozen=True)
class PromptTemplate:
    """
    A prompt with {placeholders}.

    Usage:
        template = PromptTemplate(
            template="Concepts about {keywords}",
            description="Concept batch"
        )
        template.format(keywords="habits")

    Templates that embed literal JSON braces cannot go through str.format;
    for those, only the provided keys are substituted.
    """
    template: str
    description: str = ""

    @property
    def placeholders(self) -> FrozenSet[str]:
        """Placeholder names, or an empty set when the template is not format()-able."""
        try:
            return frozenset(name for _, name, _, _ in Formatter().parse(self.template) if name)
        except ValueError:
            return frozenset()

    def format(self, **kwargs) -> str:
        try:
            return self.template.format(**kwargs)
        except (KeyError, ValueError, IndexError):
            result = self.template
            for key, value in kwargs.items():
                result = result.replace("{" + key + "}", str(value))
            return result

    def __str__(self) -> str:
        return f"PromptTemplate({self.description})"
