# quotefile

`quotefile` keeps quotes as small JSON files in a folder. Each quote has a
message and may have an author. Each quote also has an identifier, a random
UUID. The identifier is also the file name: `<id>.json`.

The package needs only the Python standard library and runs on Python 3.10 or later.

## Installation

```
pip install quotefile
```

## Quote files: `quotefile.quote`

```python
from quotefile.quote import (
    Quote,
    create_quote_file,
    read_quote,
    write_quote_file,
    delete_quote_file,
)

quote_id = create_quote_file("/tmp/quotes", Quote(message="Coucou me revoilou", author="adibou"))
print(read_quote("/tmp/quotes", quote_id))

write_quote_file("/tmp/quotes", quote_id, Quote(message="Oh non, bouzigouloum!", author="adibou"))
delete_quote_file("/tmp/quotes", quote_id)
```

- `Quote` is a frozen dataclass with the fields `message` and `author`. The
  author defaults to `""`.
- `Quote.to_json()` returns compact JSON. An empty author is left out of it.
  The characters `<`, `>`, `&`, U+2028 and U+2029 are written as `\u` escapes.
- `Quote.from_json(text)` decodes the first JSON value in the text. It ignores
  unknown keys, matches keys without regard to case, and treats a `null` or
  missing field as empty. It raises `ValueError` if the input is not a quote.
- `create_quote_file(folder, quote)` creates a new identifier, writes the file
  and returns the identifier.
- `write_quote_file(folder, quote_id, quote)` creates the file or overwrites it.
  The file holds the JSON and a trailing newline.
- `read_quote(folder, quote_id)` returns the quote. If no file has that
  identifier, it returns `None`.
- `delete_quote_file(folder, quote_id)` removes the file.

Any other failure raises `QuoteFileError`. This includes a file that cannot be
written, read, decoded or removed, and it also covers deleting a quote that does
not exist.

## Managing quotes as resources: `quotefile.provider`

The provider takes a configuration that names a folder. It hands that folder to
`QuoteResource`, which runs the create, read, update, delete and import steps on
quote files:

```python
from quotefile.provider import QuoteState, new

provider = new("dev")()
folder = provider.configure({"folder_path": "/tmp/quotes"})
resource = provider.resources()[0]()
resource.configure(folder)

state = resource.create(QuoteState(message="Coucou me revoilou", author="adibou"))
print(state.id)  # the generated UUID

state = resource.update(state.id, QuoteState(message="Oh non, bouzigouloum!", author="adibou"))
print(resource.read(state.id))
resource.delete(state.id)
```

- `new(version)` returns a factory that builds `JsonFileProvider` objects.
  Each provider reports the given `version`.
- `JsonFileProvider.configure(config)` requires a string `folder_path` and
  returns it. `resources()` returns `[QuoteResource]`, and `data_sources()`
  returns an empty list.
- `QuoteResource.configure(provider_data)` accepts the folder path. It ignores
  `None` and rejects values that are not strings.
- `QuoteState` holds `message`, `author` and `id`. `create` and `update` return
  the planned state with the `id` filled in.
- `read(quote_id)` and `import_state(quote_id)` return the stored state. Reading
  a missing quote is an error.

Every failure raises `ResourceError`. It carries a short `summary` and a longer
`detail`.

The provider and its resource are plain Python objects that you call directly.
They do not plan changes or keep state between runs, and they do not run as a
separate plugin process.

## Serving quotes: `quotefile.server`

```
quote-server
```

This starts an HTTP server on port 5678. It accepts these options:

- `--host` sets the address to listen on. The default is all interfaces.
- `--port` sets the port. The default is 5678.
- `--root` sets the directory that holds the `myquotes` folder. The default is
  `..`.

For every path, each GET or HEAD request loads every file in `<root>/myquotes`,
in file-name order. The server returns the quotes as an HTML page with the text
escaped. If the folder or a file cannot be read or decoded, the response is a
500 error. Its body is the reason, as plain text.

To use the server from code:

- `load_quotes(root)` returns the quotes, or raises `QuoteLoadError`.
- `render_page(quotes)` builds the HTML page.
- `make_server(host, port, root)` returns a bound server that uses
  `QuoteRequestHandler`. Call `serve_forever()` on it to start serving.