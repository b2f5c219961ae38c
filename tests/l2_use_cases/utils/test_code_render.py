"""Tests for code fence stripping and the text-mode preview."""

from __future__ import annotations

import pytest

from screen_to_code.l2_use_cases.utils.code_render import render_text_preview, strip_code_fence


class TestStripCodeFence:
    def test_strips_leading_and_trailing_markers(self):
        assert strip_code_fence('```html\n<p>x</p>\n```') == '\n<p>x</p>\n'

    def test_plain_html_unchanged(self):
        assert strip_code_fence('<html></html>') == '<html></html>'

    def test_inner_fences_untouched(self):
        text = '<pre>```js\ncode\n```</pre>'
        assert strip_code_fence(text) == text

    @pytest.mark.parametrize(
        ('text', 'expected'),
        [
            ('```html<p>a</p>', '<p>a</p>'),
            ('<p>a</p>```', '<p>a</p>'),
            ('', ''),
        ],
    )
    def test_one_sided(self, text, expected):
        assert strip_code_fence(text) == expected


class TestRenderTextPreview:
    def test_headings_and_paragraphs(self):
        html = '<html><body><h1>Title</h1><p>Hello   world</p><h2>Sub</h2></body></html>'
        assert render_text_preview(html) == '# Title\nHello world\n## Sub'

    def test_skips_head_script_and_style(self):
        html = (
            '<html><head><title>T</title><script src="https://cdn.tailwindcss.com"></script></head>'
            '<body><style>.x{}</style><p>Visible</p><script>alert(1)</script></body></html>'
        )
        assert render_text_preview(html) == 'Visible'

    def test_list_items_and_links(self):
        html = '<ul><li><a href="/about">About</a></li><li>Blog</li></ul>'
        assert render_text_preview(html) == '• About (/about)\n• Blog'

    def test_images_and_controls(self):
        html = '<div><img src="https://placehold.co/1x1" alt="Hero photo"><input placeholder="Email"></div>'
        assert render_text_preview(html) == '[Hero photo] [Email]'

    def test_fenced_reply(self):
        assert render_text_preview('```html\n<p>Hi</p>\n```') == 'Hi'

    def test_empty(self):
        assert render_text_preview('') == ''

    def test_table_cells_separated(self):
        html = '<table><tr><th>Plan</th><th>Price</th></tr><tr><td>Name</td><td>Age</td></tr></table>'
        assert render_text_preview(html) == 'Plan Price\nName Age'

    def test_inline_markup_stays_on_one_line(self):
        html = '<p>\n    Save <strong>20%</strong>\n    today\n</p>'
        assert render_text_preview(html) == 'Save 20% today'

    def test_comments_dropped(self):
        assert render_text_preview('<div><!-- hero --><p>Hi</p></div>') == 'Hi'
