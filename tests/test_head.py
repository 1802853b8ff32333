"""
test_head.py - Document head merging
"""

import pytest

from components import Head


@pytest.mark.head
def test_later_title_wins():
    merged = Head(title="Site").merged(Head(title="Page"))
    assert merged.title == "Page"


@pytest.mark.head
def test_missing_title_keeps_default():
    merged = Head(title="Site").merged(Head())
    assert merged.title == "Site"


@pytest.mark.head
def test_merge_with_none_copies():
    base = Head(title="Site", meta=[{"name": "description", "content": "x"}])
    merged = base.merged(None)
    assert merged is not base
    assert merged.title == "Site"
    assert merged.meta == base.meta


@pytest.mark.head
def test_meta_deduplicated_by_key():
    base = Head(meta=[
        {"name": "description", "content": "site"},
        {"property": "og:image", "content": "a.png"},
    ])
    page = Head(meta=[{"name": "description", "content": "page"}])
    merged = base.merged(page)
    assert merged.meta == [
        {"property": "og:image", "content": "a.png"},
        {"name": "description", "content": "page"},
    ]


@pytest.mark.head
def test_name_and_property_keys_are_distinct():
    merged = Head(meta=[{"name": "og:title", "content": "a"}]).merged(
        Head(meta=[{"property": "og:title", "content": "b"}]))
    assert len(merged.meta) == 2


@pytest.mark.head
def test_links_deduplicated_by_rel_and_href():
    base = Head(links=[{"rel": "icon", "href": "/favicon.ico"}])
    page = Head(links=[
        {"rel": "icon", "href": "/favicon.ico", "type": "image/svg+xml"},
        {"rel": "canonical", "href": "/posts/first-post"},
    ])
    merged = base.merged(page)
    assert merged.links == page.links


@pytest.mark.head
def test_merge_does_not_mutate_inputs():
    base = Head(title="Site", meta=[{"name": "description", "content": "site"}])
    page = Head(title="Page", meta=[{"name": "description", "content": "page"}])
    base.merged(page)
    assert base.title == "Site"
    assert base.meta == [{"name": "description", "content": "site"}]
