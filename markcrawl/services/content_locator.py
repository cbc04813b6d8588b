import logging

from markcrawl.domain.dom import DomNode, class_tokens

logger = logging.getLogger(__name__)

CONTENT_CLASSES = ("content", "main-content", "article-content", "post-content")
CONTENT_IDS = ("content", "main", "article", "post")


class ContentLocator:
    """Pick the subtree holding a page's primary readable content.

    Read-only: the returned node is part of `document`, which is never mutated.
    Callers that need to edit the subtree go through `Sanitizer`, which works
    on a copy.
    """

    def locate(self, document: DomNode, only_main_content: bool) -> DomNode:
        if only_main_content:
            for finder in (self._semantic_main, self._article, self._by_class, self._by_id):
                node = finder(document)
                if node is not None:
                    logger.debug("Main content located via %s", finder.__name__)
                    return node
        return self._body(document)

    def _body(self, document: DomNode) -> DomNode:
        body = document.find("body")
        return body if body is not None else document

    def _semantic_main(self, document: DomNode):
        return document.find("main") or document.find(attrs={"role": "main"})

    def _article(self, document: DomNode):
        return document.find("article")

    def _by_class(self, document: DomNode):
        for node in document.find_all(True):
            if any(token in CONTENT_CLASSES for token in class_tokens(node)):
                return node
        return None

    def _by_id(self, document: DomNode):
        for node in document.find_all(True):
            if node.attrs.get("id") in CONTENT_IDS:
                return node
        return None
