"""Tests for readable article extraction and the structural fallback."""

from __future__ import annotations

from bs4 import BeautifulSoup

from reader_proxy.fetch.absolutize import absolutify
from reader_proxy.fetch.extractor import extract_from_html, select_main_element

URL = "https://ex.com/page"


def test_article_page_uses_readability_result(article_page, long_paragraph):
    article = extract_from_html(article_page(), URL)

    assert article.title == "T"
    assert article.content
    assert long_paragraph.strip()[:40] in article.text_content
    assert article.length == len(article.text_content)
    assert article.length >= 500
    assert article.site_name == "ex.com"
    assert article.byline == ""


def test_excerpt_falls_back_to_first_paragraph(article_page, long_paragraph):
    article = extract_from_html(article_page(), URL)

    assert article.excerpt == long_paragraph.strip()


def test_meta_tags_fill_byline_excerpt_and_site_name(article_page):
    head = (
        '<meta property="og:site_name" content="Example News">'
        '<meta name="author" content="Ana Silva">'
        '<meta name="description" content="A short summary.">'
        '<meta property="og:title" content="The Real Headline">'
    )

    article = extract_from_html(article_page(title="Page | Example News", extra_head=head), URL)

    assert article.title == "The Real Headline"
    assert article.byline == "Ana Silva"
    assert article.excerpt == "A short summary."
    assert article.site_name == "Example News"


def test_short_page_falls_back_to_main():
    html = (
        "<html><head><title>Short</title></head><body>"
        "<nav>Home | About</nav><main><p>Tiny main text.</p></main>"
        "<footer>footer</footer></body></html>"
    )

    article = extract_from_html(html, URL)

    assert article.title == "Short"
    assert article.content == "<p>Tiny main text.</p>"
    assert article.text_content == "Tiny main text."
    assert article.length == len("Tiny main text.")
    assert article.byline == ""
    assert article.excerpt == ""
    assert article.site_name == "ex.com"


def test_fallback_prefers_article_over_main_over_role_main():
    html = (
        "<html><body>"
        '<div role="main">role</div><main>main</main><article>article</article>'
        "</body></html>"
    )

    article = extract_from_html(html, URL)

    assert article.content == "article"


def test_fallback_prefers_main_over_role_main():
    html = '<html><body><div role="main">role</div><main>main</main></body></html>'

    assert extract_from_html(html, URL).content == "main"


def test_fallback_uses_role_main_then_body():
    with_role = '<html><body><p>intro</p><div role="main">role</div></body></html>'
    body_only = "<html><body><p>just a body</p></body></html>"

    assert extract_from_html(with_role, URL).content == "role"
    assert extract_from_html(body_only, URL).content == "<p>just a body</p>"


def test_fallback_title_is_url_without_document_title():
    article = extract_from_html("<html><body><p>x</p></body></html>", URL)

    assert article.title == URL


def test_fallbacks_use_requested_url_over_served_url():
    article = extract_from_html(
        "<html><body><main>short</main></body></html>",
        "https://www.ex.com/landing",
        page_url=URL,
    )

    assert article.title == URL
    assert article.site_name == "ex.com"


def test_readability_path_leaves_malformed_links_for_absolutify(article_page, long_paragraph):
    body = (
        f'<article><p>{long_paragraph} <a href="http://[::1/broken">x</a> <a href="next">next</a></p>'
        '<img src="ht!tp://bad"></article>'
    )
    article = extract_from_html(article_page(body=body), URL)

    assert article.length >= 500
    content = absolutify(article.content, URL)
    assert 'src="ht!tp://bad"' in content
    assert 'href="http://[::1/broken"' in content
    assert 'href="https://ex.com/next"' in content


def test_empty_document_never_returns_null_content():
    article = extract_from_html("", URL)

    assert article.content == ""
    assert article.length == 0
    assert article.title == URL
    assert article.site_name == "ex.com"


def test_malformed_markup_does_not_raise():
    html = "<html><body><article><p>unclosed <b>bold<div>text</article></span>"

    article = extract_from_html(html, URL)

    assert "text" in article.text_content
    assert isinstance(article.content, str)


def test_threshold_is_configurable(article_page):
    html = article_page(body="<article><p>" + "word " * 30 + "</p></article>")

    assert extract_from_html(html, URL, char_threshold=500).excerpt == ""
    assert extract_from_html(html, URL, char_threshold=50).excerpt.startswith("word")


def test_select_main_element_returns_body_or_document():
    soup = BeautifulSoup("<html><body><p>b</p></body></html>", "lxml")

    assert select_main_element(soup).name == "body"
