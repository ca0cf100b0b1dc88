"""Tests driving the tkinter front-end. Skipped when no display is available."""

from unittest.mock import patch

import pytest

tk = pytest.importorskip("tkinter")

from treegen.exceptions import ClipboardError  # noqa: E402
from treegen.gui import CHECKED, UNCHECKED, FilterWindow, TreeGenApp  # noqa: E402


@pytest.fixture
def root():
    try:
        window = tk.Tk()
    except tk.TclError:
        pytest.skip("No display available")
    window.withdraw()
    yield window
    window.destroy()


@pytest.fixture
def app(root):
    return TreeGenApp(root)


@pytest.fixture
def project(tmp_path):
    base = tmp_path / "root"
    (base / "sub").mkdir(parents=True)
    (base / "a.txt").write_text("a")
    (base / "sub" / "c.txt").write_text("c")
    return base


def displayed_text(app):
    return app.text.get("1.0", "end-1c")


def test_generate_shows_tree(app, project):
    app.path_var.set(str(project))
    app.on_generate()
    assert displayed_text(app) == app.state.tree_text
    assert displayed_text(app).startswith("root\n")
    assert app.status_var.get() == ""


def test_generate_error_shows_status(app, project):
    app.path_var.set(str(project / "missing"))
    app.on_generate()
    assert app.status_var.get().startswith("Error: ")
    assert displayed_text(app) == ""


def test_browse_cancelled_keeps_path(app):
    app.path_var.set("/some/path")
    with patch("treegen.gui.pick_directory", return_value=None):
        app.on_browse()
    assert app.path_var.get() == "/some/path"


def test_browse_generates(app, project):
    with patch("treegen.gui.pick_directory", return_value=project):
        app.on_browse()
    assert app.path_var.get() == str(project)
    assert displayed_text(app).startswith("root\n")


def test_filter_without_tree(app):
    app.on_filter()
    assert app.status_var.get() == "No tree has been generated"


def test_filter_toggle_and_apply(app, project):
    app.path_var.set(str(project))
    app.on_generate()
    window = FilterWindow(app, app.state.begin_filter())
    sub = next(child for child in app.state.working_copy.children if child.name == "sub")
    iid = str(sub.identity)

    window.tree.selection_set(iid)
    window._on_toggle(None)
    assert window.tree.item(iid, "text") == f"{UNCHECKED} sub"
    assert window.tree.item(str(sub.children[0].identity), "text") == f"{UNCHECKED} c.txt"

    window.tree.selection_set(iid)
    window._on_toggle(None)
    assert window.tree.item(iid, "text") == f"{CHECKED} sub"

    window.tree.selection_set(iid)
    window._on_toggle(None)
    window._on_apply()
    assert displayed_text(app) == "root\n|__ a.txt\n"


def test_filter_cancel(app, project):
    app.path_var.set(str(project))
    app.on_generate()
    before = displayed_text(app)
    window = FilterWindow(app, app.state.begin_filter())
    window._on_cancel()
    assert app.state.working_copy is None
    assert displayed_text(app) == before


def test_filter_keeps_single_window(app, project):
    app.path_var.set(str(project))
    app.on_generate()
    app.on_filter()
    first = app.filter_window
    working_copy = app.state.working_copy

    app.on_filter()
    assert app.filter_window is first
    assert app.state.working_copy is working_copy
    assert first.is_current()


def test_filter_reopens_after_close(app, project):
    app.path_var.set(str(project))
    app.on_generate()
    app.on_filter()
    first = app.filter_window
    first._on_cancel()
    assert app.filter_window is None

    app.on_filter()
    assert app.filter_window is not None
    assert app.filter_window is not first
    app.filter_window._on_apply()
    assert app.filter_window is None


def test_filter_window_closes_when_tree_regenerated(app, project):
    app.path_var.set(str(project))
    app.on_generate()
    app.on_filter()
    window = app.filter_window
    app.on_generate()
    assert not window.is_current()

    sub = next(child for child in window.working_copy.children if child.name == "sub")
    window.tree.selection_set(str(sub.identity))
    window._on_toggle(None)
    assert app.filter_window is None
    assert sub.is_included

    app.on_filter()
    assert app.filter_window is not None
    assert app.filter_window.is_current()


def test_filter_replaces_stale_window(app, project):
    app.path_var.set(str(project))
    app.on_generate()
    app.on_filter()
    stale = app.filter_window
    app.on_generate()

    app.on_filter()
    assert app.filter_window is not stale
    assert app.filter_window.is_current()
    assert not stale.winfo_exists()


def test_copy(app, project):
    app.path_var.set(str(project))
    app.on_generate()
    with patch("treegen.gui.copy_to_clipboard") as mock_copy:
        app.on_copy()
    mock_copy.assert_called_once_with(app.state.tree_text)
    assert app.status_var.get() == "Copied to clipboard."


def test_copy_failure(app, project):
    app.path_var.set(str(project))
    app.on_generate()
    with patch("treegen.gui.copy_to_clipboard", side_effect=ClipboardError("no backend")):
        app.on_copy()
    assert app.status_var.get() == "Error: Clipboard unavailable: no backend"
