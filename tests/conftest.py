from __future__ import annotations

import threading
from html import escape
from typing import Dict, List, Optional, Sequence, Tuple, Union

import pytest


def listing_page(
    items: Sequence[Tuple[str, Optional[str]]],
    next_href: Optional[str] = None,
    with_content: bool = True,
) -> str:
    """Build a listing page in the shape the catalog returns to AJAX requests."""
    cards = []
    for title, price in items:
        price_html = ""
        if price is not None:
            price_html = (
                '<div class="product-price"><span>'
                f'<span class="oe_currency_value">{escape(price)}</span>&nbsp;€'
                "</span></div>"
            )
        cards.append(
            '<div class="tp-product-item-grid-1">'
            f'<h6 class="tp-product-title"><a href="/shop/x">{escape(title)}</a></h6>'
            f"{price_html}"
            "</div>"
        )
    content_cls = "container mt-0" if with_content else "container"
    more = ""
    if next_href is not None:
        more = f'<a class="tp-load-more-on-scroll" href="{escape(next_href)}">Load more</a>'
    return (
        "<html><body>"
        f'<div class="{content_cls}"><div class="row">{"".join(cards)}</div></div>'
        f"{more}"
        "</body></html>"
    )


class FakeResponse:
    def __init__(self, status_code: int = 200, text: str = "") -> None:
        self.status_code = status_code
        self.text = text


class FakeSession:
    """Stands in for requests.Session; maps URLs to bodies, status codes or exceptions."""

    def __init__(self, pages: Dict[str, Union[str, int, Exception]]) -> None:
        self.pages = pages
        self.calls: List[Tuple[str, Optional[float]]] = []
        self._lock = threading.Lock()

    def get(self, url, timeout=None, **kwargs):
        with self._lock:
            self.calls.append((url, timeout))
        page = self.pages.get(url, 404)
        if isinstance(page, Exception):
            raise page
        if isinstance(page, int):
            return FakeResponse(status_code=page, text="")
        return FakeResponse(status_code=200, text=page)

    def urls(self) -> List[str]:
        return [url for url, _ in self.calls]


class RecordingExporter:
    def __init__(self) -> None:
        self.calls = []
        self._lock = threading.Lock()

    def __call__(self, records, sheet_title):
        with self._lock:
            self.calls.append((list(records), sheet_title))
        return f"{sheet_title}.xlsx"


@pytest.fixture
def exporter() -> RecordingExporter:
    return RecordingExporter()
