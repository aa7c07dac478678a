from __future__ import annotations


class ParserError(Exception):
    """Base class for page-level failures that end one category crawl."""


class FetchError(ParserError):
    def __init__(self, url: str, message: str) -> None:
        super().__init__(message)
        self.url = url


class TransportError(FetchError):
    def __init__(self, url: str, cause: BaseException) -> None:
        super().__init__(url, f"request to {url} failed: {cause}")
        self.cause = cause


class StatusError(FetchError):
    def __init__(self, url: str, code: int) -> None:
        super().__init__(url, f"status code: {code}")
        self.code = code


class ParseError(ParserError):
    pass
