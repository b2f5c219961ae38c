"""Tests for rendered chat turns and content resolution."""

from __future__ import annotations

from screen_to_code.l1_entities.chat_message import ImagePart, TextPart
from screen_to_code.l1_entities.chat_turn import ChatTurn, Parts, RawText, to_content


class TestToContent:
    def test_string_is_raw_text(self):
        assert to_content('<html></html>') == RawText('<html></html>')

    def test_none_is_empty_raw_text(self):
        assert to_content(None) == RawText('')

    def test_part_list_is_parts(self):
        content = to_content(
            [
                {'type': 'text', 'text': 'hello'},
                {'type': 'image_url', 'image_url': {'url': 'https://placehold.co/1x1'}},
            ]
        )
        assert isinstance(content, Parts)
        assert isinstance(content.parts[0], TextPart)
        assert isinstance(content.parts[1], ImagePart)

    def test_unparseable_list_falls_back_to_raw_text(self):
        content = to_content([{'type': 'refusal', 'refusal': 'no'}])
        assert isinstance(content, RawText)
        assert 'refusal' in content.text

    def test_other_scalar_stringified(self):
        assert to_content(42) == RawText('42')


class TestChatTurn:
    def test_from_assistant_message(self):
        turn = ChatTurn.from_message({'role': 'assistant', 'content': '```html\n<p>x</p>\n```'})
        assert turn.role == 'assistant'
        assert isinstance(turn.content, RawText)

    def test_unknown_role_becomes_assistant(self):
        turn = ChatTurn.from_message({'role': 'tool', 'content': 'x'})
        assert turn.role == 'assistant'

    def test_missing_role_becomes_assistant(self):
        assert ChatTurn.from_message({'content': 'x'}).role == 'assistant'
