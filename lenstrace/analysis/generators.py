"""AI generator keyword heuristics."""

from __future__ import annotations

from typing import NamedTuple


class GeneratorRule(NamedTuple):
    """A generator label and the keywords that hint at it."""

    label: str
    keywords: tuple[str, ...]

    def matches(self, text: str) -> bool:
        return any(keyword in text for keyword in self.keywords)


# Evaluated in order; the first matching rule wins.
GENERATOR_RULES: tuple[GeneratorRule, ...] = (
    GeneratorRule("Midjourney", ("midjourney", "mj_")),
    GeneratorRule("DALL-E", ("dalle", "dall-e")),
    GeneratorRule("Stable Diffusion", ("stable-diffusion", "sdxl")),
    GeneratorRule("Sora", ("sora",)),
    GeneratorRule("Runway", ("runway",)),
    GeneratorRule("Pika", ("pika",)),
)


def identify_generator(
    text: str, rules: tuple[GeneratorRule, ...] = GENERATOR_RULES
) -> str | None:
    """Return the label of the first rule with a keyword in ``text``."""
    haystack = text.lower()
    for rule in rules:
        if rule.matches(haystack):
            return rule.label
    return None
