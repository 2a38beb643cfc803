"""A provider that manages quotes stored as JSON files in a folder."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, Mapping

from quotefile.quote import (
    Quote,
    QuoteFileError,
    create_quote_file,
    delete_quote_file,
    read_quote,
    write_quote_file,
)

PROVIDER_TYPE_NAME = "jsonfile"
QUOTE_RESOURCE_TYPE_NAME = PROVIDER_TYPE_NAME + "_quote"


class ResourceError(Exception):
    """An operation on the provider or one of its resources failed."""

    def __init__(self, summary: str, detail: str) -> None:
        super().__init__(detail)
        self.summary = summary
        self.detail = detail


@dataclass(frozen=True)
class QuoteState:
    """The attributes of a quote resource: message, optional author, computed id."""

    message: str
    author: str | None = None
    id: str | None = None


class QuoteResource:
    """Creates, reads, updates and deletes one quote file."""

    type_name = QUOTE_RESOURCE_TYPE_NAME

    def __init__(self) -> None:
        self.folder_path = ""

    def configure(self, provider_data: Any) -> None:
        """Take the folder path handed over by a configured provider."""
        if provider_data is None:
            return
        if not isinstance(provider_data, str):
            raise ResourceError(
                "Unexpected Resource Configure Type",
                f"Expected string, got: {type(provider_data).__name__}. "
                "Please report this issue to the provider developers.",
            )
        self.folder_path = provider_data

    def create(self, plan: QuoteState) -> QuoteState:
        """Write a new quote file and return the state with its generated id."""
        quote = Quote(message=plan.message or "", author=plan.author or "")
        try:
            quote_id = create_quote_file(self.folder_path, quote)
        except QuoteFileError as err:
            raise ResourceError(
                "failed to create quote", f"failed to create quote: {err}"
            ) from err
        return replace(plan, id=quote_id)

    def read(self, quote_id: str) -> QuoteState:
        """Return the current state of the quote stored under ``quote_id``."""
        try:
            quote = read_quote(self.folder_path, quote_id)
        except QuoteFileError as err:
            raise ResourceError(
                "failed to read quote", f"failed to read quote: {err}"
            ) from err
        if quote is None:
            raise ResourceError(
                "failed to read quote",
                f"failed to read quote: no quote file with id {quote_id}",
            )
        return QuoteState(message=quote.message, author=quote.author, id=quote_id)

    def update(self, quote_id: str, plan: QuoteState) -> QuoteState:
        """Overwrite the quote stored under ``quote_id`` with the planned values."""
        quote = Quote(message=plan.message or "", author=plan.author or "")
        try:
            write_quote_file(self.folder_path, quote_id, quote)
        except QuoteFileError as err:
            raise ResourceError(
                "failed to update quote", f"failed to update quote: {err}"
            ) from err
        return replace(plan, id=quote_id)

    def delete(self, quote_id: str) -> None:
        """Remove the quote file stored under ``quote_id``."""
        try:
            delete_quote_file(self.folder_path, quote_id)
        except QuoteFileError as err:
            raise ResourceError(
                "failed to delete quote", f"failed to delete quote: {err}"
            ) from err

    def import_state(self, quote_id: str) -> QuoteState:
        """Bring an existing quote under management by its id."""
        return self.read(quote_id)


class JsonFileProvider:
    """The provider: configured with the folder that holds the quote files."""

    type_name = PROVIDER_TYPE_NAME

    def __init__(self, version: str) -> None:
        self.version = version

    def configure(self, config: Mapping[str, Any]) -> str:
        """Validate the provider configuration and return the data for resources."""
        folder_path = config.get("folder_path")
        if folder_path is None:
            raise ResourceError(
                "Missing required argument",
                'The argument "folder_path" is required, but no definition was found.',
            )
        if not isinstance(folder_path, str):
            raise ResourceError(
                "Incorrect attribute value type",
                f'Attribute "folder_path" must be a string, got: {type(folder_path).__name__}',
            )
        return folder_path

    def resources(self) -> list[Callable[[], QuoteResource]]:
        """Return the factories of the resources this provider offers."""
        return [QuoteResource]

    def data_sources(self) -> list[Callable[[], Any]]:
        """Return the factories of the data sources this provider offers."""
        return []


def new(version: str) -> Callable[[], JsonFileProvider]:
    """Return a factory that builds providers reporting ``version``."""

    def factory() -> JsonFileProvider:
        return JsonFileProvider(version)

    return factory