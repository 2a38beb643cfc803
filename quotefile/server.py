"""A small web server that shows the quotes found in a folder."""

from __future__ import annotations

import argparse
import html
import logging
import os
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import Iterable, Union

from quotefile.quote import Quote

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_PORT = 5678
DEFAULT_ROOT = ".."
_QUOTES_FOLDER = "myquotes"

_log = logging.getLogger(__name__)

_PAGE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>Quotes</title>
</head>
<body>
<h1>Quotes</h1>
{items}
</body>
</html>
"""


class QuoteLoadError(Exception):
    """Raised when the quotes folder or one of its files cannot be loaded."""


def load_quotes(root: PathLike = DEFAULT_ROOT) -> list[Quote]:
    """Load every quote file in the ``myquotes`` folder under ``root``, by file name."""
    folder = Path(root) / _QUOTES_FOLDER
    try:
        with os.scandir(folder) as listing:
            entries = sorted(listing, key=lambda entry: entry.name)
    except OSError as err:
        raise QuoteLoadError(f"failed to read quotes folder: {err}") from err

    quotes = []
    for entry in entries:
        try:
            text = Path(entry.path).read_text(encoding="utf-8", errors="replace")
        except OSError as err:
            raise QuoteLoadError(f"failed to open quote file: {err}") from err
        try:
            quotes.append(Quote.from_json(text))
        except ValueError as err:
            raise QuoteLoadError(
                f"failed to decode quote file {entry.name}: {err}"
            ) from err
    return quotes


def _render_quote(quote: Quote) -> str:
    parts = [f"<figure>\n<blockquote>{html.escape(quote.message)}</blockquote>"]
    if quote.author:
        parts.append(f"<figcaption>{html.escape(quote.author)}</figcaption>")
    parts.append("</figure>")
    return "\n".join(parts)


def render_page(quotes: Iterable[Quote]) -> str:
    """Render the quotes as an HTML page, escaping their text."""
    return _PAGE.format(items="\n".join(_render_quote(quote) for quote in quotes))


class QuoteRequestHandler(BaseHTTPRequestHandler):
    """Answers every path with the page of quotes, or the load error."""

    def do_GET(self) -> None:
        self._respond(with_body=True)

    def do_HEAD(self) -> None:
        self._respond(with_body=False)

    def _respond(self, with_body: bool) -> None:
        root = getattr(self.server, "quotes_root", DEFAULT_ROOT)
        try:
            quotes = load_quotes(root)
        except QuoteLoadError as err:
            self._send(HTTPStatus.INTERNAL_SERVER_ERROR, str(err), "text/plain", with_body)
            return
        self._send(HTTPStatus.OK, render_page(quotes), "text/html", with_body)

    def _send(self, status: HTTPStatus, text: str, content_type: str, with_body: bool) -> None:
        body = text.encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", f"{content_type}; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        if with_body:
            self.wfile.write(body)

    def log_message(self, format: str, *args: object) -> None:
        """Send request logs to the module logger rather than stderr."""
        _log.debug("%s - %s", self.address_string(), format % args)


class _QuoteServer(ThreadingHTTPServer):
    daemon_threads = True

    def __init__(self, address: tuple[str, int], root: PathLike) -> None:
        self.quotes_root = root
        super().__init__(address, QuoteRequestHandler)


def make_server(
    host: str = "", port: int = DEFAULT_PORT, root: PathLike = DEFAULT_ROOT
) -> ThreadingHTTPServer:
    """Create a bound server that serves the quotes under ``root``."""
    return _QuoteServer((host, port), root)


def main(argv: list[str] | None = None) -> int:
    """Run the quote server until interrupted."""
    parser = argparse.ArgumentParser(
        description="Serve the quotes of a myquotes folder as a web page."
    )
    parser.add_argument("--host", default="", help="address to listen on")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    parser.add_argument(
        "--root", default=DEFAULT_ROOT, help="directory that holds the myquotes folder"
    )
    args = parser.parse_args(argv)

    print(f"will listen to port {args.port}")
    try:
        server = make_server(args.host, args.port, args.root)
    except OSError as err:
        print(err)
        return 1
    with server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())