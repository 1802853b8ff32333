"""
Head Module - Per-render document metadata

Collects the <title>, <meta> and <link> tags of one page render. The layout
supplies defaults and the page merges its own head on top, so the page wins
on conflicts (same title slot, same meta key, same link rel/href).
"""

from typing import Dict, List, Optional, Tuple


def _meta_key(attrs: Dict[str, str]) -> Tuple:
    for key in ('name', 'property', 'http-equiv', 'charset'):
        if key in attrs:
            return (key, attrs[key] if key != 'charset' else None)
    return tuple(sorted(attrs.items()))


def _link_key(attrs: Dict[str, str]) -> Tuple:
    return (attrs.get('rel'), attrs.get('href'))


class Head:
    """Document head for a single render"""

    def __init__(self, title: Optional[str] = None,
                 meta: Optional[List[Dict[str, str]]] = None,
                 links: Optional[List[Dict[str, str]]] = None):
        self.title = title
        self.meta = list(meta or [])
        self.links = list(links or [])

    def merged(self, other: Optional['Head']) -> 'Head':
        """
        Return a new head with ``other`` applied on top of this one

        Args:
            other: Head declared later in the render (usually by the page)

        Returns:
            Head: Combined head; neither input is modified
        """
        if other is None:
            return Head(self.title, self.meta, self.links)

        meta = {}
        for attrs in self.meta + other.meta:
            key = _meta_key(attrs)
            meta.pop(key, None)
            meta[key] = attrs

        links = {}
        for attrs in self.links + other.links:
            key = _link_key(attrs)
            links.pop(key, None)
            links[key] = attrs

        title = other.title if other.title is not None else self.title
        return Head(title, list(meta.values()), list(links.values()))

    def __repr__(self):
        return f'<Head title={self.title!r} meta={len(self.meta)} links={len(self.links)}>'
