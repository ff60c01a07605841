# backend/app/utils/text_utils.py
import re

_BR_PATTERN = re.compile(r'<br[^>]*>', re.IGNORECASE)
_TAG_PATTERN = re.compile(r'<[^>]+>')
_PARAGRAPH_PATTERN = re.compile(r'</?p[^>]*>', re.IGNORECASE)


def strip_tags(html: str) -> str:
    """Remove HTML tags and collapse whitespace."""
    if not html:
        return ""
    text = _TAG_PATTERN.sub(' ', html)
    return re.sub(r'\s+', ' ', text).strip()


def auto_excerpt(html: str, words: int = 55, more: str = '…') -> str:
    """
    Build an excerpt from the first ``words`` words of an HTML body.

    Tags are stripped first; ``more`` is appended only when text was cut.
    """
    parts = strip_tags(html).split(' ')
    parts = [p for p in parts if p]
    if len(parts) <= words:
        return ' '.join(parts)
    return ' '.join(parts[:words]) + more


def excerpt_by_line_breaks(html: str, lines: int = 3) -> str:
    """
    Return the first ``lines`` lines of a body, re-joined with ``<br>``.

    Lines are separated by ``<br>`` tags; newlines inside the body are treated
    as line breaks too and paragraph tags are dropped, so plain-text and
    rendered bodies cut the same way.
    """
    if not html:
        return ""
    text = html.replace('\r\n', '\n').strip()
    text = _PARAGRAPH_PATTERN.sub('\n', text)
    text = re.sub(r'\n+', '<br>', text.strip())
    segments = [s.strip() for s in _BR_PATTERN.split(text)]
    return '<br>'.join(segments[:lines])
