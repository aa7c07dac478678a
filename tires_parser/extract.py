from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, FrozenSet, List, Optional, Protocol, Sequence, Union

from bs4 import BeautifulSoup

from .config import (
    CONTENT_SELECTOR,
    DEFAULT_QUANTITY,
    ITEM_SELECTOR,
    NEXT_PAGE_SELECTOR,
    PRICE_SELECTOR,
    STUDDED_SUFFIX,
    TITLE_SELECTOR,
)
from .errors import ParseError
from .filters import apply_markup, check_item_name, normalize_name, parse_price, parse_year
from .types import TireRecord


class HtmlTree(Protocol):
    """The few DOM operations the extractor needs."""

    root: Any

    def select(self, node: Any, selector: str) -> List[Any]:
        ...

    def text(self, node: Any) -> str:
        ...

    def attr(self, node: Any, name: str) -> Optional[str]:
        ...


class SoupTree:
    def __init__(self, soup: BeautifulSoup) -> None:
        self.root = soup

    def select(self, node, selector: str) -> list:
        return node.select(selector)

    def text(self, node) -> str:
        # Raw concatenated text without separators between nodes.
        return node.get_text() if node is not None else ""

    def attr(self, node, name: str) -> Optional[str]:
        value = node.get(name)
        if isinstance(value, list):
            value = " ".join(value)
        return value


def parse_page(html: Union[str, bytes]) -> SoupTree:
    if not isinstance(html, (str, bytes)):
        raise ParseError(f"expected page markup, got {type(html).__name__}")
    try:
        soup = BeautifulSoup(html, "lxml")
    except Exception as exc:
        raise ParseError(f"cannot parse page: {exc}") from exc
    return SoupTree(soup)


@dataclass
class ExtractOptions:
    bad_words: Sequence[str] = ()
    del_words: Sequence[str] = ()
    markup_percent: float = 0.0
    studded: FrozenSet[str] = frozenset()


@dataclass(frozen=True)
class Skip:
    reason: str


@dataclass(frozen=True)
class Record:
    record: TireRecord


EntryResult = Union[Skip, Record]


@dataclass
class PageResult:
    records: List[TireRecord] = field(default_factory=list)
    next_href: Optional[str] = None
    skipped: List[Skip] = field(default_factory=list)


@dataclass
class PageNames:
    names: List[str] = field(default_factory=list)
    next_href: Optional[str] = None


def _joined_text(tree: HtmlTree, nodes: list) -> str:
    return "".join(tree.text(n) for n in nodes)


def _filtered_name(tree: HtmlTree, item, bad_words, del_words):
    title = _joined_text(tree, tree.select(item, TITLE_SELECTOR))
    words, discard = check_item_name(title.split(), bad_words, del_words)
    if discard:
        return title, None
    return title, " ".join(words)


def _items(tree: HtmlTree) -> list:
    # Content blocks may nest; one descendant query keeps entries unique and ordered.
    return tree.select(tree.root, f"{CONTENT_SELECTOR} {ITEM_SELECTOR}")


def _next_href(tree: HtmlTree) -> Optional[str]:
    links = tree.select(tree.root, NEXT_PAGE_SELECTOR)
    if not links:
        return None
    return tree.attr(links[0], "href")


def extract_entry(tree: HtmlTree, item, options: ExtractOptions) -> EntryResult:
    title, name = _filtered_name(tree, item, options.bad_words, options.del_words)
    if name is None:
        return Skip("filtered")

    year = parse_year(title)
    if normalize_name(name) in options.studded:
        name = name + STUDDED_SUFFIX

    raw_price = parse_price(_joined_text(tree, tree.select(item, PRICE_SELECTOR)))
    if raw_price is None:
        return Skip("price")

    return Record(
        TireRecord(
            name=name,
            price=apply_markup(raw_price, options.markup_percent),
            year=year,
            quantity=DEFAULT_QUANTITY,
            country="",
        )
    )


def extract_from_tree(tree: HtmlTree, options: ExtractOptions) -> PageResult:
    blocks = tree.select(tree.root, CONTENT_SELECTOR)
    if not blocks:
        return PageResult()

    result = PageResult()
    for item in _items(tree):
        entry = extract_entry(tree, item, options)
        if isinstance(entry, Skip):
            result.skipped.append(entry)
        else:
            result.records.append(entry.record)

    result.next_href = _next_href(tree)
    return result


def extract_page(html: Union[str, bytes], options: ExtractOptions) -> PageResult:
    """Extract tire records and the next-page link from one listing page.

    A page without the content block yields nothing and ends pagination.
    Entries with a filtered name or an unreadable price are skipped.
    Raises ParseError when the markup cannot be parsed at all.
    """
    return extract_from_tree(parse_page(html), options)


def extract_names(
    html: Union[str, bytes],
    bad_words: Sequence[str] = (),
    del_words: Sequence[str] = (),
) -> PageNames:
    """Collect normalized product names from one page of the studded section."""
    tree = parse_page(html)
    blocks = tree.select(tree.root, CONTENT_SELECTOR)
    if not blocks:
        return PageNames()

    result = PageNames()
    for item in _items(tree):
        _, name = _filtered_name(tree, item, bad_words, del_words)
        if name is not None:
            result.names.append(normalize_name(name))

    result.next_href = _next_href(tree)
    return result
