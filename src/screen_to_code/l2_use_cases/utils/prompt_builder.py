"""Pure functions for building the screenshot-to-code conversation."""

from __future__ import annotations

from collections.abc import Sequence

from screen_to_code.l1_entities.chat_message import (
    ConversationRequest,
    ImagePart,
    Message,
    TextPart,
)

TAILWIND_PROMPT = """
You are an expert Tailwind developer.
You take screenshots of a reference web page from the user, and then build single page apps
using Tailwind, HTML and JS.
You might also be given a screenshot (the second image) of a web page that you have already built,
and asked to update it to look more like the reference image (the first image).

- Make sure the app looks exactly like the screenshot.
- Pay close attention to background color, text color, font size, font family,
padding, margin, border, etc. Match the colors and sizes exactly.
- Use the exact text from the screenshot.
- Do not add comments in the code such as "<!-- Add other navigation links as needed -->" and
"<!-- ... other news items ... -->" in place of writing the full code. WRITE THE FULL CODE.
- Repeat elements as needed to match the screenshot. For example, if there are 15 items, the code
should have 15 items. DO NOT LEAVE comments like "<!-- Repeat for each news item -->".
- For images, use placeholder images from https://placehold.co and include a detailed description
of the image in the alt text so that an image generation AI can generate the image later.

In terms of libraries,

- Use this script to include Tailwind: <script src="https://cdn.tailwindcss.com"></script>
- You can use Google Fonts
- Font Awesome for icons: <link rel="stylesheet" href="https://cdnjs.cloudflare.com/ajax/libs/font-awesome/5.15.3/css/all.min.css"></link>

Return only the full code in <html></html> tags.
Do not include markdown or html at the start or end.
"""


def build_conversation_request(data_urls: Sequence[str], prompt: str = TAILWIND_PROMPT) -> ConversationRequest:
    """One user message: the instructional prompt followed by one image part per data URL."""
    content: list[TextPart | ImagePart] = [TextPart(text=prompt)]
    content.extend(ImagePart.from_url(url) for url in data_urls)
    return ConversationRequest(messages=[Message(role='user', content=content)])


def normalize_messages(messages: Sequence[Message]) -> list[dict]:
    """Wire form for the provider: text parts as-is, image parts re-wrapped to keep only the url."""
    normalized: list[dict] = []
    for message in messages:
        content: list[dict] = []
        for part in message.content:
            if isinstance(part, ImagePart):
                content.append({'type': 'image_url', 'image_url': {'url': part.image_url.url}})
            else:
                content.append(part.model_dump())
        normalized.append({'role': message.role, 'content': content})
    return normalized
