"""
frontmatter.py
-------------------
Front matter rendering for imported entries.

Header values are stored already quoted, so the renderer only has to sort
and join them. How a raw value is quoted is a pluggable policy:

- ``json``: double-quoted with backslash escapes (``"It's \\"here\\""``).
  Static site generators reading the header as YAML accept it as a
  double-quoted scalar.
- ``yaml``: single-quoted YAML scalar emitted by PyYAML (``'It''s'``).

Usage:
    from mtimport.utils.frontmatter import get_quote_policy, render_front_matter

    policy = get_quote_policy("json")
    header = {"title": policy.quote("Hi"), "date": "2006-01-02 15:04:05 +00:00"}
    render_front_matter(header)
"""
from __future__ import annotations

# --- Standard library imports ---
import json
from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping

# --- Third-party library imports ---
import yaml


FRONT_MATTER_DELIMITER = "---"


@dataclass(frozen=True)
class QuotePolicy:
    """
    A pair of functions turning a raw header value into a scalar literal
    and back.

    Attributes:
        name: Policy name as accepted by the CLI
        quote: raw value -> quoted literal
        unquote: quoted literal -> raw value
    """

    name: str
    quote: Callable[[str], str]
    unquote: Callable[[str], str]


def _json_quote(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def _json_unquote(literal: str) -> str:
    return json.loads(literal)


def _yaml_quote(value: str) -> str:
    dumped = yaml.safe_dump(
        value,
        default_style="'",
        allow_unicode=True,
        width=float("inf"),
    )
    # Root scalars may be followed by an explicit document end marker
    if dumped.endswith("\n...\n"):
        dumped = dumped[: -len("\n...\n")]
    return dumped.rstrip("\n")


def _yaml_unquote(literal: str) -> str:
    return str(yaml.safe_load(literal))


QUOTE_POLICIES: Dict[str, QuotePolicy] = {
    "json": QuotePolicy("json", _json_quote, _json_unquote),
    "yaml": QuotePolicy("yaml", _yaml_quote, _yaml_unquote),
}

DEFAULT_QUOTE_POLICY = QUOTE_POLICIES["json"]


def get_quote_policy(name: str) -> QuotePolicy:
    """
    Look up a quoting policy by name.

    Raises:
        ValueError: If no policy has that name
    """
    try:
        return QUOTE_POLICIES[name]
    except KeyError:
        raise ValueError(
            f"Unknown quote style '{name}' "
            f"(expected one of: {', '.join(sorted(QUOTE_POLICIES))})"
        ) from None


def render_front_matter(header: Mapping[str, str]) -> str:
    """
    Render header fields between front matter delimiters.

    Fields are emitted as ``key: value`` lines in lexicographic order so
    the output does not depend on the order fields were parsed in.

    Examples:
        >>> render_front_matter({"title": '"Hi"', "date": "2006-01-02"})
        '---\\ndate: 2006-01-02\\ntitle: "Hi"\\n---\\n'
    """
    lines: List[str] = sorted(f"{key}: {value}\n" for key, value in header.items())
    return FRONT_MATTER_DELIMITER + "\n" + "".join(lines) + FRONT_MATTER_DELIMITER + "\n"
