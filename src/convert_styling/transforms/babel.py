"""Array-literal remover for transpiler configs.

Removes a quoted string literal (``'nativewind/babel'``) from array literals
such as ``presets: [...]`` without parsing JavaScript.  Three patterns run
in precedence order, each globally and each on the previous one's output:

  own_line          the literal alone on its line, optional trailing comma
  first_element     ``[ 'lit', ...``
  trailing_element  ``..., 'lit'`` followed by ``,`` or ``]``

A sole-element array (``['lit']``) matches none of them on purpose; the
detector reports it for manual removal instead of guessing.
"""

from __future__ import annotations

import re
from functools import lru_cache

from convert_styling.rules import LEGACY_BABEL_PRESET
from convert_styling.transforms import (
    TransformResult,
    TransformStep,
    regex_step,
    run_steps,
)


@lru_cache(maxsize=16)
def array_literal_steps(literal: str) -> tuple[TransformStep, ...]:
    lit = re.escape(literal)
    own_line = re.compile(
        rf"^[ \t]*(?P<q>['\"]){lit}(?P=q)[ \t]*,?[ \t]*\r?\n", re.MULTILINE
    )
    first_element = re.compile(rf"(?P<open>\[\s*)(?P<q>['\"]){lit}(?P=q)\s*,\s*")
    trailing_element = re.compile(rf",\s*(?P<q>['\"]){lit}(?P=q)\s*(?=[,\]])")
    return (
        regex_step("own_line", f"Removed {literal} line.", own_line, ""),
        regex_step(
            "first_element",
            f"Removed leading {literal} element.",
            first_element,
            r"\g<open>",
        ),
        regex_step(
            "trailing_element",
            f"Removed {literal} element.",
            trailing_element,
            "",
        ),
    )


def remove_array_literal(
    source: str, literal: str = LEGACY_BABEL_PRESET
) -> TransformResult:
    """Remove every array occurrence of *literal*; ``changed`` means removed."""
    return run_steps(source, array_literal_steps(literal))
