from bs4 import BeautifulSoup

from markcrawl.services.content_locator import ContentLocator


def _soup(html):
    return BeautifulSoup(html, "html.parser")


def test_main_element_wins():
    doc = _soup("<body><article>A</article><main>M</main></body>")
    node = ContentLocator().locate(doc, True)
    assert node.name == "main"


def test_role_main_counts_as_main():
    doc = _soup('<body><div role="main">M</div><article>A</article></body>')
    node = ContentLocator().locate(doc, True)
    assert node.get_text() == "M"


def test_article_before_class_and_id():
    doc = _soup('<body><div id="content">I</div><div class="content">C</div><article>A</article></body>')
    node = ContentLocator().locate(doc, True)
    assert node.name == "article"


def test_class_token_match():
    doc = _soup('<body><div class="wrapper post-content">P</div></body>')
    node = ContentLocator().locate(doc, True)
    assert node.get_text() == "P"


def test_class_substring_does_not_match():
    doc = _soup('<body><div class="contentious">X</div></body>')
    node = ContentLocator().locate(doc, True)
    assert node.name == "body"


def test_id_match():
    doc = _soup('<body><section id="post">P</section></body>')
    node = ContentLocator().locate(doc, True)
    assert node.name == "section"


def test_falls_back_to_body():
    doc = _soup("<html><body><div>plain</div></body></html>")
    node = ContentLocator().locate(doc, True)
    assert node.name == "body"


def test_body_when_main_content_disabled():
    doc = _soup("<html><body><main>M</main><p>other</p></body></html>")
    node = ContentLocator().locate(doc, False)
    assert node.name == "body"


def test_document_when_no_body():
    doc = _soup("<p>fragment</p>")
    node = ContentLocator().locate(doc, True)
    assert node is doc


def test_locate_does_not_mutate_document():
    html = "<body><main><nav>n</nav>text</main></body>"
    doc = _soup(html)
    ContentLocator().locate(doc, True)
    assert str(doc) == str(_soup(html))
