from __future__ import annotations

import argparse
import sys
from functools import partial
from typing import Callable, List, Optional

from .config import (
    BAD_WORDS_FILE,
    BASE_URL,
    CATEGORIES_FILE,
    DEFAULT_MARKUP_PERCENT,
    DEL_WORDS_FILE,
    STUDDED_URL,
)
from .crawler import CategoryResult, TiresParser
from .fetch import create_session
from .messages import DEFAULT_LANG, MESSAGES, msg
from .storage import add_category, load_categories, load_words_from_file, remove_category
from .types import Category


def run_parsing(
    categories: List[Category],
    markup_percent: float = DEFAULT_MARKUP_PERCENT,
    out_dir: str = ".",
    bad_words_path: str = BAD_WORDS_FILE,
    del_words_path: str = DEL_WORDS_FILE,
    base_url: str = BASE_URL,
    studded_url: Optional[str] = STUDDED_URL,
    timeout_seconds: Optional[float] = None,
    user_agent: Optional[str] = None,
    workers: Optional[int] = None,
    lang: str = DEFAULT_LANG,
) -> List[CategoryResult]:
    """High-level convenience function: parse all categories into Excel files.

    Returns one result per category, in the given order.
    """
    parser = TiresParser(
        categories,
        markup_percent=markup_percent,
        bad_words=load_words_from_file(bad_words_path),
        del_words=load_words_from_file(del_words_path),
        session_factory=partial(create_session, user_agent=user_agent),
        base_url=base_url,
        studded_url=studded_url,
        timeout_seconds=timeout_seconds,
        max_workers=workers,
        out_dir=out_dir,
        lang=lang,
    )
    return parser.run()


def _print_categories(categories: List[Category], lang: str) -> None:
    if not categories:
        print(msg(lang, "no_categories"))
        return
    for idx, c in enumerate(categories, start=1):
        print(msg(lang, "category_item", index=idx, name=c.name, url=c.url))


def _add(path: str, url: str, name: str, lang: str) -> int:
    url, name = url.strip(), name.strip()
    if not url:
        print(msg(lang, "empty_url"), file=sys.stderr)
        return 1
    if not name:
        print(msg(lang, "empty_name"), file=sys.stderr)
        return 1
    add_category(path, url, name)
    print(msg(lang, "added", name=name))
    return 0


def _remove(path: str, number: int, lang: str) -> int:
    removed = remove_category(path, number)
    if removed is None:
        print(msg(lang, "invalid_number"), file=sys.stderr)
        return 1
    print(msg(lang, "removed", name=removed.name))
    return 0


def _run(path: str, lang: str, **options) -> int:
    categories = load_categories(path)
    if not categories:
        print(msg(lang, "need_categories"), file=sys.stderr)
        return 1
    markup = options.get("markup_percent", DEFAULT_MARKUP_PERCENT)
    print(msg(lang, "run_summary", total=len(categories), markup=markup), flush=True)
    run_parsing(categories, lang=lang, **options)
    return 0


def _parse_markup(text: str) -> float:
    text = text.strip().replace(",", ".")
    if not text:
        return DEFAULT_MARKUP_PERCENT
    try:
        return float(text)
    except ValueError:
        return DEFAULT_MARKUP_PERCENT


def run_menu(path: str, lang: str = DEFAULT_LANG, input_func: Callable[[str], str] = input) -> int:
    """Interactive numbered menu. Returns when the user picks "5" or input ends."""
    while True:
        print(msg(lang, "menu"))
        try:
            choice = input_func(msg(lang, "prompt_choice")).strip()
            if choice == "1":
                url = input_func(msg(lang, "prompt_url"))
                if not url.strip():
                    print(msg(lang, "empty_url"))
                    continue
                name = input_func(msg(lang, "prompt_name"))
                _add(path, url, name, lang)
            elif choice == "2":
                _print_categories(load_categories(path), lang)
            elif choice == "3":
                categories = load_categories(path)
                if not categories:
                    print(msg(lang, "no_categories"))
                    continue
                for idx, c in enumerate(categories, start=1):
                    print(f"{idx}. {c.name}")
                raw = input_func(msg(lang, "prompt_remove")).strip()
                try:
                    number = int(raw)
                except ValueError:
                    print(msg(lang, "invalid_number"))
                    continue
                if number == 0:
                    print(msg(lang, "cancelled"))
                    continue
                _remove(path, number, lang)
            elif choice == "4":
                if not load_categories(path):
                    print(msg(lang, "need_categories"))
                    continue
                raw = input_func(msg(lang, "prompt_markup", default=DEFAULT_MARKUP_PERCENT))
                _run(path, lang, markup_percent=_parse_markup(raw))
            elif choice == "5":
                print(msg(lang, "bye"))
                return 0
            else:
                print(msg(lang, "invalid_choice"))
        except EOFError:
            print(msg(lang, "bye"))
            return 0


def _build_arg_parser(lang: str = DEFAULT_LANG) -> argparse.ArgumentParser:
    loc = MESSAGES.get(lang, MESSAGES[DEFAULT_LANG])
    p = argparse.ArgumentParser(
        prog="tires-parser",
        description=loc["help_desc"],
    )
    p.add_argument(
        "-c",
        "--categories",
        dest="categories_path",
        default=CATEGORIES_FILE,
        help=loc["help_categories"],
    )
    p.add_argument(
        "--lang",
        dest="lang",
        choices=["uk", "en"],
        default=lang,
        help=loc["help_lang"],
    )
    sub = p.add_subparsers(dest="command")

    add_p = sub.add_parser("add", help=loc["help_add"])
    add_p.add_argument("url", help=loc["help_url"])
    add_p.add_argument("name", help=loc["help_name"])

    sub.add_parser("list", help=loc["help_list"])

    remove_p = sub.add_parser("remove", help=loc["help_remove"])
    remove_p.add_argument("number", type=int, help=loc["help_number"])

    sub.add_parser("menu", help=loc["help_menu"])

    run_p = sub.add_parser("run", help=loc["help_run"])
    run_p.add_argument(
        "-m",
        "--markup",
        dest="markup_percent",
        type=float,
        default=DEFAULT_MARKUP_PERCENT,
        help=loc["help_markup"],
    )
    run_p.add_argument(
        "-o",
        "--out-dir",
        dest="out_dir",
        default=".",
        help=loc["help_out"],
    )
    run_p.add_argument(
        "--bad-words",
        dest="bad_words_path",
        default=BAD_WORDS_FILE,
        help=loc["help_bad_words"],
    )
    run_p.add_argument(
        "--del-words",
        dest="del_words_path",
        default=DEL_WORDS_FILE,
        help=loc["help_del_words"],
    )
    run_p.add_argument(
        "--base-url",
        dest="base_url",
        default=BASE_URL,
        help=loc["help_base_url"],
    )
    studded = run_p.add_mutually_exclusive_group()
    studded.add_argument(
        "--studded-url",
        dest="studded_url",
        default=STUDDED_URL,
        help=loc["help_studded_url"],
    )
    studded.add_argument(
        "--no-studded",
        dest="studded_url",
        action="store_const",
        const=None,
        help=loc["help_no_studded"],
    )
    run_p.add_argument(
        "--timeout",
        dest="timeout_seconds",
        type=float,
        default=None,
        help=loc["help_timeout"],
    )
    run_p.add_argument(
        "-H",
        "--user-agent",
        dest="user_agent",
        default=None,
        help=loc["help_ua"],
    )
    run_p.add_argument(
        "-w",
        "--workers",
        dest="workers",
        type=int,
        default=None,
        help=loc["help_workers"],
    )
    return p


def main(argv: Optional[list[str]] = None) -> int:
    parser = _build_arg_parser(DEFAULT_LANG)
    args = parser.parse_args(argv)
    lang = args.lang
    path = args.categories_path
    try:
        if args.command == "add":
            return _add(path, args.url, args.name, lang)
        if args.command == "list":
            _print_categories(load_categories(path), lang)
            return 0
        if args.command == "remove":
            return _remove(path, args.number, lang)
        if args.command == "run":
            return _run(
                path,
                lang,
                markup_percent=args.markup_percent,
                out_dir=args.out_dir,
                bad_words_path=args.bad_words_path,
                del_words_path=args.del_words_path,
                base_url=args.base_url,
                studded_url=args.studded_url,
                timeout_seconds=args.timeout_seconds,
                user_agent=args.user_agent,
                workers=args.workers,
            )
        return run_menu(path, lang)
    except KeyboardInterrupt:
        print(msg(lang, "interrupted"), file=sys.stderr)
        return 130
    except Exception as exc:
        print(msg(lang, "error", error=exc), file=sys.stderr)
        return 1
