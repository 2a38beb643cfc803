"""Quotes stored as one JSON file per quote inside a folder."""

from __future__ import annotations

import json
import os
import uuid
from dataclasses import dataclass
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

# Characters escaped in encoded output so the JSON is safe to embed in HTML.
_HTML_SAFE = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)

_FIELDS = ("message", "author")


class QuoteFileError(Exception):
    """Raised when a quote file cannot be written, read, decoded or removed."""


def _reject_constant(name: str) -> float:
    raise ValueError(f"invalid character {name[0]!r} looking for beginning of value")


@dataclass(frozen=True)
class Quote:
    """A quote: what was said and, optionally, who said it."""

    message: str
    author: str = ""

    def to_json(self) -> str:
        """Encode the quote as compact JSON, leaving out an empty author."""
        data = {"message": self.message}
        if self.author:
            data["author"] = self.author
        text = json.dumps(data, ensure_ascii=False, separators=(",", ":"))
        return text.translate(_HTML_SAFE)

    @classmethod
    def from_json(cls, text: str) -> Quote:
        """Decode the first JSON value in ``text`` into a quote.

        Unknown keys are ignored, keys match case-insensitively, null or
        missing fields leave the field empty, and anything after the first
        value is ignored.
        """
        stripped = text.lstrip(" \t\r\n")
        if not stripped:
            raise ValueError("EOF")
        decoder = json.JSONDecoder(parse_constant=_reject_constant)
        value, _ = decoder.raw_decode(stripped)
        if value is None:
            return cls(message="")
        if not isinstance(value, dict):
            raise ValueError(
                f"cannot unmarshal {type(value).__name__} into a quote object"
            )
        fields = dict.fromkeys(_FIELDS, "")
        for key, item in value.items():
            name = key.lower()
            if name not in fields or item is None:
                continue
            if not isinstance(item, str):
                raise ValueError(
                    f"cannot unmarshal {type(item).__name__} into field {name} of type string"
                )
            fields[name] = item
        return cls(**fields)


def _filename(folder: PathLike, quote_id: str) -> str:
    return os.path.join(folder, f"{quote_id}.json")


def create_quote_file(folder: PathLike, quote: Quote) -> str:
    """Write ``quote`` to a new file in ``folder`` and return its generated id."""
    quote_id = str(uuid.uuid4())
    write_quote_file(folder, quote_id, quote)
    return quote_id


def write_quote_file(folder: PathLike, quote_id: str, quote: Quote) -> None:
    """Create or overwrite the file holding the quote with ``quote_id``."""
    try:
        handle = open(_filename(folder, quote_id), "w", encoding="utf-8", newline="")
    except OSError as err:
        raise QuoteFileError(f"failed to create/truncate quote file: {err}") from err
    with handle:
        try:
            handle.write(quote.to_json() + "\n")
        except OSError as err:
            raise QuoteFileError(f"failed to write quote in file: {err}") from err


def read_quote(folder: PathLike, quote_id: str) -> Quote | None:
    """Return the quote with ``quote_id``, or None when no such file exists."""
    try:
        with open(_filename(folder, quote_id), encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except FileNotFoundError:
        return None
    except OSError as err:
        raise QuoteFileError(f"failed to read quote file: {err}") from err
    try:
        return Quote.from_json(text)
    except ValueError as err:
        raise QuoteFileError(f"failed to decode quote file: {str(err)!r}") from err


def delete_quote_file(folder: PathLike, quote_id: str) -> None:
    """Remove the file holding the quote with ``quote_id``."""
    try:
        os.remove(_filename(folder, quote_id))
    except OSError as err:
        raise QuoteFileError(f"failed to delete quote file: {err}") from err