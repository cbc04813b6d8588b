from bs4 import BeautifulSoup

from markcrawl.services.markdown_converter import HtmlMarkdownConverter


def _convert(html, **kwargs):
    return HtmlMarkdownConverter().convert(BeautifulSoup(html, "html.parser"), **kwargs)


def test_atx_headings():
    assert _convert("<h1>Title</h1><h2>Sub</h2>") == "# Title\n\n## Sub"


def test_links_rendered_by_default():
    assert _convert('<p><a href="https://example.com/x">Go</a></p>') == "[Go](https://example.com/x)"


def test_links_reduced_to_text_when_removed():
    assert _convert('<p>See <a href="https://example.com/x">docs</a> here</p>', remove_links=True) == "See docs here"


def test_images_rendered_by_default():
    assert _convert('<p><img src="a.png" alt="pic"></p>') == "![pic](a.png)"


def test_images_dropped_when_removed():
    assert _convert('<p>before<img src="a.png" alt="pic">after</p>', remove_images=True) == "beforeafter"


def test_tables_rendered_as_pipe_tables():
    md = _convert("<table><tr><th>A</th><th>B</th></tr><tr><td>1</td><td>2</td></tr></table>")
    assert "| A | B |" in md
    assert "| 1 | 2 |" in md


def test_markdown_special_characters_escaped():
    md = _convert("<p>2*3 and snake_case</p>")
    assert "2\\*3" in md
    assert "snake\\_case" in md


def test_line_break_kept_as_hard_break():
    assert _convert("<p>line one<br>line two</p>") == "line one\\\nline two"


def test_preformatted_text_is_left_untouched():
    md = _convert("<pre>a  \n\n\n\nb</pre>")
    assert md.startswith("```")
    assert "a  \n\n\n\nb" in md


def test_blocks_separated_by_single_blank_line():
    md = _convert("<p>a</p><p>b</p>")
    assert md == "a\n\nb"
