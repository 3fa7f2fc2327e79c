import re
from typing import Optional

_THINK_RE = re.compile(r"<think>.*?</think>", flags=re.DOTALL)
_WRAPPING_FENCE_RE = re.compile(r"^\s*```[a-zA-Z0-9-]*[ \t]*\n(.*?)\n\s*```\s*$", flags=re.DOTALL)
_DOCUMENT_RE = re.compile(r"<!DOCTYPE html>.*</html>", flags=re.DOTALL | re.IGNORECASE)
_DOCUMENT_START_RE = re.compile(r"<!DOCTYPE html>.*", flags=re.DOTALL | re.IGNORECASE)


def cleanup_llm_output(content: str) -> str:
    """
    Removes common LLM artifacts like <think> blocks and markdown fences.
    Returns the cleaned content string.
    """
    if not content:
        return ""

    content = _THINK_RE.sub("", content)

    # Only a fence wrapping the entire content is removed.
    fence_match = _WRAPPING_FENCE_RE.match(content)
    if fence_match:
        content = fence_match.group(1).strip()

    return content


def extract_html_document(content: str) -> Optional[str]:
    """Return the `<!DOCTYPE html> ... </html>` span of `content`, or None."""
    m = _DOCUMENT_RE.search(content)
    return m.group(0) if m else None


def preview_html_document(partial: str) -> Optional[str]:
    """
    Best-effort renderable document from a partially streamed response:
    everything from the doctype onward, closed with `</html>` if still open.
    """
    m = _DOCUMENT_START_RE.search(partial)
    if not m:
        return None
    doc = m.group(0)
    if not doc.rstrip().endswith("</html>"):
        doc += "\n</html>"
    return doc
