import json
import socket
import threading
import urllib.error
import urllib.request

import pytest

from quotefile.quote import Quote
from quotefile.server import QuoteLoadError, load_quotes, main, make_server, render_page


def _write(folder, name, data):
    (folder / name).write_text(json.dumps(data), encoding="utf-8")


@pytest.fixture
def quotes_root(tmp_path):
    folder = tmp_path / "myquotes"
    folder.mkdir()
    _write(folder, "b.json", {"message": "second", "author": "bee"})
    _write(folder, "a.json", {"message": "first", "author": "ay"})
    return tmp_path


@pytest.fixture
def running_server(request):
    servers = []

    def start(root):
        server = make_server("127.0.0.1", 0, root)
        thread = threading.Thread(target=server.serve_forever, daemon=True)
        thread.start()
        servers.append((server, thread))
        host, port = server.server_address[:2]
        return f"http://{host}:{port}/"

    yield start
    for server, thread in servers:
        server.shutdown()
        server.server_close()
        thread.join(timeout=5)


def test_load_quotes_sorted_by_file_name(quotes_root):
    assert load_quotes(quotes_root) == [Quote("first", "ay"), Quote("second", "bee")]


def test_load_quotes_empty_folder(tmp_path):
    (tmp_path / "myquotes").mkdir()
    assert load_quotes(tmp_path) == []


def test_load_quotes_missing_folder(tmp_path):
    with pytest.raises(QuoteLoadError, match="failed to read quotes folder"):
        load_quotes(tmp_path)


def test_load_quotes_bad_file_names_it(quotes_root):
    (quotes_root / "myquotes" / "c.json").write_text("{oops", encoding="utf-8")
    with pytest.raises(QuoteLoadError, match="failed to decode quote file c.json"):
        load_quotes(quotes_root)


def test_render_page_escapes_text():
    page = render_page([Quote("<script>", "a & b")])
    assert "<script>" not in page
    assert "&lt;script&gt;" in page
    assert "a &amp; b" in page


def test_render_page_lists_every_quote_in_order():
    page = render_page([Quote("first", "ay"), Quote("second")])
    assert page.index("first") < page.index("second")
    assert page.count("<blockquote>") == 2
    assert page.count("<figcaption>") == 1


def test_server_serves_quotes(quotes_root, running_server):
    url = running_server(quotes_root)
    with urllib.request.urlopen(url + "any/path", timeout=5) as response:
        assert response.status == 200
        body = response.read().decode("utf-8")
    assert body == render_page(load_quotes(quotes_root))


def test_server_reports_load_error(tmp_path, running_server):
    url = running_server(tmp_path)
    with pytest.raises(urllib.error.HTTPError) as info:
        urllib.request.urlopen(url, timeout=5)
    assert info.value.code == 500
    assert "failed to read quotes folder" in info.value.read().decode("utf-8")


def test_main_fails_when_port_is_taken(tmp_path, capsys):
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as holder:
        holder.bind(("127.0.0.1", 0))
        holder.listen()
        port = holder.getsockname()[1]
        result = main(["--host", "127.0.0.1", "--port", str(port), "--root", str(tmp_path)])
    assert result == 1
    assert f"will listen to port {port}" in capsys.readouterr().out