"""
Turning backend output into display-ready HTML.

format_markdown() is a lightweight, line-oriented converter for the handful of
markdown constructs small chat models actually emit: fenced code blocks,
inline code, **bold**, paragraphs and line breaks. It is NOT a general
markdown parser: lists, links and nested emphasis pass through as text, and an
unbalanced ``` fence is left visible as literal backticks.

Input is HTML-escaped before any markup is added, so backend text can never
inject tags of its own.
"""

import html
import re

from constants.tutor import FALLBACK_PREAMBLE, FALLBACK_RESPONSES, FALLBACK_SETTINGS_HINT
from utils.types import FormattedResponse

TAGGED_FENCE = re.compile(r"```([\w+#.-]+)[ \t]*\n(.*?)```", re.DOTALL)
PLAIN_FENCE = re.compile(r"```\n?(.*?)```", re.DOTALL)
INLINE_CODE = re.compile(r"`([^`]+)`")
BOLD = re.compile(r"\*\*([^*]+)\*\*")

_PLACEHOLDER = "\x00{}\x00"
_PLACEHOLDER_PATTERN = re.compile(r"\x00(\d+)\x00")


def _code_block(code: str, language: str = None) -> str:
    code = code.rstrip("\n")
    if language:
        return f'<pre><code class="language-{language}">{code}</code></pre>'
    return f"<pre><code>{code}</code></pre>"


def _paragraphs(segment: str) -> list[str]:
    """Wrap the prose between code blocks, one <p> per blank-line-separated chunk."""
    segment = INLINE_CODE.sub(r"<code>\1</code>", segment)
    segment = BOLD.sub(r"<strong>\1</strong>", segment)
    paragraphs = []
    for chunk in segment.split("\n\n"):
        chunk = chunk.strip("\n")
        if chunk.strip():
            paragraphs.append("<p>" + chunk.replace("\n", "<br>") + "</p>")
    return paragraphs


def format_markdown(text: str) -> str:
    """Convert lightweight markdown to HTML (see module docstring for limits)."""
    escaped = html.escape(text.replace("\x00", "").strip(), quote=False)

    # Code blocks are set aside so the paragraph pass below never wraps them
    blocks = []

    def stash(block_html):
        blocks.append(block_html)
        return _PLACEHOLDER.format(len(blocks) - 1)

    escaped = TAGGED_FENCE.sub(lambda m: stash(_code_block(m.group(2), m.group(1))), escaped)
    escaped = PLAIN_FENCE.sub(lambda m: stash(_code_block(m.group(1))), escaped)

    # split() with a capture group alternates prose, block index, prose, ...
    parts = []
    for i, segment in enumerate(_PLACEHOLDER_PATTERN.split(escaped)):
        if i % 2:
            parts.append(blocks[int(segment)])
        else:
            parts.extend(_paragraphs(segment))
    return "".join(parts) or "<p></p>"


def format_response(text: str) -> FormattedResponse:
    return FormattedResponse(html=format_markdown(text), is_error=False)


def match_fallback(question: str) -> tuple[str, str] | None:
    """First (keyword, answer) pair whose keyword occurs in ``question``."""
    lowered = (question or "").lower()
    for keyword, answer in FALLBACK_RESPONSES:
        if keyword in lowered:
            return keyword, answer
    return None


def fallback_response(question: str, error: str) -> FormattedResponse:
    """
    Answer a question when the backend failed.

    A keyword hit gives a canned explanation (not flagged as an error);
    otherwise the failure itself is shown with a hint to check settings.
    """
    match = match_fallback(question)
    if match:
        _, answer = match
        return FormattedResponse(
            html=f"<p>{FALLBACK_PREAMBLE}</p><p>{answer}</p>",
            is_error=False,
        )

    return FormattedResponse(
        html=f"<p>⚠️ {html.escape(error or '', quote=False)}</p><p>{FALLBACK_SETTINGS_HINT}</p>",
        is_error=True,
    )
