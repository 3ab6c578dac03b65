"""Tests for page metadata detection."""

from __future__ import annotations

import json

from bs4 import BeautifulSoup

from reader_proxy.fetch.metadata import document_title, read_metadata


def _soup(head: str = "", body: str = "") -> BeautifulSoup:
    return BeautifulSoup(f"<html><head>{head}</head><body>{body}</body></html>", "lxml")


def test_meta_tags():
    soup = _soup(
        '<meta name="dc.creator" content="Maria Souza">'
        '<meta property="og:description" content="  Spaced   out  ">'
        '<meta property="og:site_name" content="Folha">'
        '<meta name="twitter:title" content="Tweet title">'
    )

    meta = read_metadata(soup)

    assert meta.byline == "Maria Souza"
    assert meta.excerpt == "Spaced out"
    assert meta.site_name == "Folha"
    assert meta.title == "Tweet title"


def test_og_title_wins_over_twitter_title():
    soup = _soup(
        '<meta name="twitter:title" content="Tweet title">'
        '<meta property="og:title" content="OG title">'
    )

    assert read_metadata(soup).title == "OG title"


def test_json_ld_takes_precedence():
    ld = {
        "@context": "https://schema.org",
        "@type": "NewsArticle",
        "headline": "LD headline",
        "author": [{"@type": "Person", "name": "Ana"}, {"@type": "Person", "name": "Bia"}],
        "description": "LD description",
        "publisher": {"@type": "Organization", "name": "LD Publisher"},
    }
    soup = _soup(
        f'<script type="application/ld+json">{json.dumps(ld)}</script>'
        '<meta name="author" content="Meta Author">'
        '<meta property="og:site_name" content="Meta Site">'
    )

    meta = read_metadata(soup)

    assert meta.title == "LD headline"
    assert meta.byline == "Ana, Bia"
    assert meta.excerpt == "LD description"
    assert meta.site_name == "LD Publisher"


def test_json_ld_graph_and_invalid_blocks():
    graph = {
        "@context": "https://schema.org",
        "@graph": [
            {"@type": "WebSite", "name": "Site"},
            {"@type": "BlogPosting", "name": "Post name", "author": {"name": "Carla"}},
        ],
    }
    soup = _soup(
        '<script type="application/ld+json">{not json</script>'
        f'<script type="application/ld+json">{json.dumps(graph)}</script>'
    )

    meta = read_metadata(soup)

    assert meta.title == "Post name"
    assert meta.byline == "Carla"


def test_byline_from_markup():
    soup = _soup(body='<div class="post"><span class="byline">Por João Lima</span><p>Text</p></div>')

    assert read_metadata(soup).byline == "Por João Lima"


def test_rel_author_link():
    soup = _soup(body='<p>By <a rel="author" href="/u/1">Dani</a></p>')

    assert read_metadata(soup).byline == "Dani"


def test_missing_metadata_is_empty():
    meta = read_metadata(_soup(body="<p>nothing here</p>"))

    assert (meta.title, meta.byline, meta.excerpt, meta.site_name) == ("", "", "", "")


def test_document_title_normalizes_whitespace():
    assert document_title(_soup("<title>\n  A   title \n</title>")) == "A title"
    assert document_title(_soup()) == ""
