from __future__ import annotations

import sys
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from functools import partial
from typing import Callable, FrozenSet, List, Optional, Sequence, Set
from urllib.parse import urljoin

from .config import BASE_URL, DEFAULT_MARKUP_PERCENT, STUDDED_URL
from .errors import FetchError, ParseError, ParserError
from .excel_writer import write_records_to_excel
from .extract import ExtractOptions, extract_names, extract_page
from .fetch import create_session, fetch_html
from .messages import DEFAULT_LANG, msg
from .types import Category, TireRecord


FetchFunc = Callable[[str], str]
Exporter = Callable[[List[TireRecord], str], Optional[str]]


@dataclass
class CrawlOutcome:
    pages: int = 0
    error: Optional[ParserError] = None


@dataclass
class CategoryResult:
    category: Category
    records: List[TireRecord] = field(default_factory=list)
    outcome: CrawlOutcome = field(default_factory=CrawlOutcome)
    path: Optional[str] = None


def crawl_pages(
    seed_url: str,
    fetch: FetchFunc,
    process: Callable[[str], Optional[str]],
    base_url: str = BASE_URL,
    label: str = "",
    lang: str = DEFAULT_LANG,
) -> CrawlOutcome:
    """
    Follow "load more" links from seed_url until a page has none.
    `process` handles one page body and returns the next href (or None).
    A fetch or parse error ends the crawl; the error is kept in the outcome.
    """
    outcome = CrawlOutcome()
    current_url: Optional[str] = seed_url
    while current_url:
        try:
            html = fetch(current_url)
        except FetchError as exc:
            print(msg(lang, "fetch_failed", name=label, error=exc), file=sys.stderr, flush=True)
            outcome.error = exc
            break
        outcome.pages += 1

        try:
            next_href = process(html)
        except ParseError as exc:
            print(msg(lang, "parse_failed", name=label, error=exc), file=sys.stderr, flush=True)
            outcome.error = exc
            break

        if not next_href:
            break
        try:
            current_url = urljoin(base_url, next_href)
        except ValueError as exc:
            error = ParseError(f"bad next page link {next_href!r}: {exc}")
            print(msg(lang, "parse_failed", name=label, error=error), file=sys.stderr, flush=True)
            outcome.error = error
            break
    return outcome


def build_studded_index(
    url: str,
    fetch: FetchFunc,
    bad_words: Sequence[str] = (),
    del_words: Sequence[str] = (),
    base_url: str = BASE_URL,
    lang: str = DEFAULT_LANG,
) -> FrozenSet[str]:
    """Crawl the studded section and return the normalized names found there.

    Errors stop the crawl early; whatever was collected is still returned.
    """
    print(msg(lang, "studded_start", url=url), flush=True)
    names: Set[str] = set()

    def process(html: str) -> Optional[str]:
        page = extract_names(html, bad_words, del_words)
        names.update(page.names)
        return page.next_href

    outcome = crawl_pages(url, fetch, process, base_url=base_url, label=url, lang=lang)
    print(msg(lang, "studded_done", count=len(names), pages=outcome.pages), flush=True)
    return frozenset(names)


def crawl_category(
    category: Category,
    fetch: FetchFunc,
    options: ExtractOptions,
    base_url: str = BASE_URL,
    lang: str = DEFAULT_LANG,
    result: Optional[CategoryResult] = None,
) -> CategoryResult:
    """Crawl one category; records are appended to `result` page by page."""
    print(msg(lang, "category_start", name=category.name), flush=True)
    if result is None:
        result = CategoryResult(category=category)
    page_no = 0

    def process(html: str) -> Optional[str]:
        nonlocal page_no
        page_no += 1
        page = extract_page(html, options)
        result.records.extend(page.records)
        print(
            msg(
                lang,
                "category_page",
                name=category.name,
                page=page_no,
                found=len(page.records),
                skipped=len(page.skipped),
            ),
            flush=True,
        )
        return page.next_href

    result.outcome = crawl_pages(
        category.url, fetch, process, base_url=base_url, label=category.name, lang=lang
    )
    return result


class TiresParser:
    """Builds the studded index, then crawls every category concurrently.

    Each category task collects into its own list and hands it to the
    exporter once, under a lock, when its crawl is done.
    """

    def __init__(
        self,
        categories: Sequence[Category],
        markup_percent: float = DEFAULT_MARKUP_PERCENT,
        bad_words: Sequence[str] = (),
        del_words: Sequence[str] = (),
        exporter: Optional[Exporter] = None,
        session_factory: Callable = create_session,
        base_url: str = BASE_URL,
        studded_url: Optional[str] = STUDDED_URL,
        timeout_seconds: Optional[float] = None,
        max_workers: Optional[int] = None,
        out_dir: str = ".",
        lang: str = DEFAULT_LANG,
    ) -> None:
        self.categories = list(categories)
        self.markup_percent = markup_percent
        self.bad_words = list(bad_words)
        self.del_words = list(del_words)
        self.exporter = exporter or partial(write_records_to_excel, out_dir=out_dir, lang=lang)
        self.session_factory = session_factory
        self.base_url = base_url
        self.studded_url = studded_url
        self.timeout_seconds = timeout_seconds
        self.max_workers = max_workers
        self.out_dir = out_dir
        self.lang = lang
        self.studded: FrozenSet[str] = frozenset()
        self._export_lock = threading.Lock()

    def _fetcher(self) -> FetchFunc:
        # One session per task; sessions are not shared between threads.
        session = self.session_factory()
        return partial(fetch_html, session=session, timeout_seconds=self.timeout_seconds)

    def _export(self, result: CategoryResult) -> None:
        with self._export_lock:
            try:
                result.path = self.exporter(result.records, result.category.name)
            except Exception as exc:
                print(
                    msg(self.lang, "export_failed", name=result.category.name, error=exc),
                    file=sys.stderr,
                    flush=True,
                )

    def _scrape_category(self, category: Category, options: ExtractOptions) -> CategoryResult:
        result = CategoryResult(category=category)
        try:
            crawl_category(
                category,
                self._fetcher(),
                options,
                base_url=self.base_url,
                lang=self.lang,
                result=result,
            )
        finally:
            # Collected records are exported even when the crawl raises.
            self._export(result)
        return result

    def run(self) -> List[CategoryResult]:
        if self.studded_url:
            self.studded = build_studded_index(
                self.studded_url,
                self._fetcher(),
                self.bad_words,
                self.del_words,
                base_url=self.base_url,
                lang=self.lang,
            )

        options = ExtractOptions(
            bad_words=self.bad_words,
            del_words=self.del_words,
            markup_percent=self.markup_percent,
            studded=self.studded,
        )

        print(msg(self.lang, "stage_categories", total=len(self.categories)), flush=True)
        results: List[CategoryResult] = []
        if self.categories:
            workers = self.max_workers or len(self.categories)
            with ThreadPoolExecutor(max_workers=workers) as ex:
                futures = [ex.submit(self._scrape_category, c, options) for c in self.categories]
                results = [f.result() for f in futures]

        print(msg(self.lang, "stage_done", out_dir=self.out_dir), flush=True)
        return results
