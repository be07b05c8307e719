"""Text transforms — ordered lists of named, independently idempotent steps.

Every transform in this package is a pure ``str -> TransformResult`` built
from :class:`TransformStep` objects and composed with :func:`run_steps`.
Each step must satisfy ``step(step(x)) == step(x)``; the composition then
satisfies it too, which is what makes re-running a migration a no-op.

Available transforms:
    - remove_array_literal: drop a string literal from array literals (babel)
    - migrate_metro_config: bundler import/wrapper/option renames (metro)
    - normalize_css_header: canonical Tailwind 4 + Uniwind header (global.css)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence


@dataclass(frozen=True, slots=True)
class TransformStep:
    """One named rewrite. ``note`` is reported when the step fires."""

    name: str
    note: str
    apply: Callable[[str], str]

    def __call__(self, text: str) -> str:
        return self.apply(text)


@dataclass(frozen=True, slots=True)
class TransformResult:
    updated: str
    changed: bool
    fired: tuple[str, ...] = ()
    notes: tuple[str, ...] = ()


def run_steps(source: str, steps: Sequence[TransformStep]) -> TransformResult:
    """Run *steps* in order; each sees the previous step's output."""
    text = source
    fired: list[TransformStep] = []
    for step in steps:
        nxt = step(text)
        if nxt != text:
            fired.append(step)
        text = nxt
    return TransformResult(
        updated=text,
        changed=text != source,
        fired=tuple(s.name for s in fired),
        notes=tuple(s.note for s in fired),
    )


def regex_step(name: str, note: str, pattern, repl) -> TransformStep:
    """Build a step that applies ``pattern.sub(repl, text)`` globally."""
    return TransformStep(name=name, note=note, apply=lambda text: pattern.sub(repl, text))


# Re-exported at the bottom to avoid circular imports.
from .babel import remove_array_literal  # noqa: E402, F401
from .css import normalize_css_header  # noqa: E402, F401
from .metro import migrate_metro_config  # noqa: E402, F401
