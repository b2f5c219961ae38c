"""Pure helpers for displaying a generated-code reply: fence stripping and text-mode preview."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup, NavigableString

_FENCE_RE = re.compile(r'\A```html|```\Z')

_SKIPPED_TAGS = ['script', 'style', 'head', 'title', 'noscript', 'template']
_BLOCK_TAGS = [
    'address', 'article', 'aside', 'blockquote', 'br', 'dd', 'div', 'dl', 'dt', 'fieldset',
    'figcaption', 'figure', 'footer', 'form', 'header', 'hr', 'li', 'main', 'nav', 'ol', 'p',
    'pre', 'section', 'table', 'tr', 'ul', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6',
]  # fmt: skip
_CELL_TAGS = ['td', 'th']


def strip_code_fence(text: str) -> str:
    """Drop a leading ```html marker and a trailing ``` marker, nothing else."""
    return _FENCE_RE.sub('', text)


def _annotate(soup: BeautifulSoup) -> None:
    """Rewrite non-text elements into the inline markers the preview shows."""
    for heading in soup.find_all(re.compile(r'^h[1-6]$')):
        heading.insert(0, '#' * int(heading.name[1]) + ' ')
    for item in soup.find_all('li'):
        item.insert(0, '• ')
    for link in soup.find_all('a', href=True):
        link.append(f' ({link["href"]})')
    for img in soup.find_all('img'):
        img.replace_with(f' [{img.get("alt") or "image"}] ')
    for field in soup.find_all('input'):
        label = field.get('value') or field.get('placeholder')
        if label:
            field.replace_with(f' [{label}] ')
        else:
            field.decompose()


def render_text_preview(html: str) -> str:
    """Render the visible content of an HTML document as terminal-friendly text.

    Headings get ``#`` prefixes, list items bullets, links their href, images
    their alt text in brackets. Table cells are separated by a space.
    """
    soup = BeautifulSoup(strip_code_fence(html), 'html.parser')
    while (hidden := soup.find(_SKIPPED_TAGS)) is not None:
        hidden.decompose()

    # source whitespace collapses; only block boundaries break lines
    for text in soup.find_all(string=True):
        if type(text) is NavigableString:
            text.replace_with(re.sub(r'\s+', ' ', text))

    _annotate(soup)
    for block in soup.find_all(_BLOCK_TAGS):
        block.insert_before('\n')
        block.insert_after('\n')
    for cell in soup.find_all(_CELL_TAGS):
        cell.insert_after(' ')

    lines = (' '.join(line.split()) for line in soup.get_text().split('\n'))
    return '\n'.join(line for line in lines if line)
