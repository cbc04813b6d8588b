import logging

from markdownify import ATX, BACKSLASH, MarkdownConverter

from markcrawl.domain.dom import DomNode

logger = logging.getLogger(__name__)


class PolicyMarkdownConverter(MarkdownConverter):
    """markdownify converter that can suppress links and images."""

    def __init__(self, remove_links: bool = False, remove_images: bool = False, **options):
        super().__init__(**options)
        self.remove_links = remove_links
        self.remove_images = remove_images

    def convert_a(self, el, text, *args, **kwargs):
        if self.remove_links:
            return text or ""
        return super().convert_a(el, text, *args, **kwargs)

    def convert_img(self, el, text, *args, **kwargs):
        if self.remove_images:
            return ""
        return super().convert_img(el, text, *args, **kwargs)


class HtmlMarkdownConverter:
    """Turn a sanitized DOM fragment into markdown.

    ATX headings, pipe tables, backslash hard breaks and no line wrapping.
    Text is escaped so that literal `*`, `_` and other control characters survive a markdown parser.
    """

    def __init__(self, **overrides):
        self._options = {
            "heading_style": ATX,
            "bullets": "*",
            "wrap": False,
            "newline_style": BACKSLASH,
            "escape_asterisks": True,
            "escape_underscores": True,
            "escape_misc": True,
        }
        self._options.update(overrides)

    def convert(self, node: DomNode, remove_links: bool = False, remove_images: bool = False) -> str:
        converter = PolicyMarkdownConverter(
            remove_links=remove_links,
            remove_images=remove_images,
            **self._options,
        )
        return converter.convert_soup(node).strip()
