"""Tests for browser navigation state."""

from pathlib import Path

from fsbrowser.navigation import BrowserState, resolve_start_dir


def test_refresh_lists_current_dir(sample_tree: Path) -> None:
    state = BrowserState(sample_tree)
    state.refresh()
    assert [e.name for e in state.entries][:2] == ["Beta", "gamma"]
    assert state.error is None


def test_enter_directory_rebuilds_listing(sample_tree: Path) -> None:
    state = BrowserState(sample_tree)
    state.refresh()
    before = state.entries
    beta = next(e for e in state.entries if e.name == "Beta")

    assert state.enter(beta)
    assert state.current_dir == sample_tree.resolve() / "Beta"
    assert [e.name for e in state.entries] == ["two", "one"]
    assert state.entries is not before


def test_enter_file_is_ignored(sample_tree: Path) -> None:
    state = BrowserState(sample_tree)
    state.refresh()
    alpha = next(e for e in state.entries if e.name == "alpha.txt")
    assert not state.enter(alpha)
    assert state.current_dir == sample_tree.resolve()


def test_navigate_up(sample_tree: Path) -> None:
    state = BrowserState(sample_tree / "Beta")
    assert state.can_navigate_up()
    assert state.navigate_up()
    assert state.current_dir == sample_tree.resolve()
    assert "Beta" in [e.name for e in state.entries]


def test_up_disabled_at_root() -> None:
    root = Path(Path.cwd().anchor)
    state = BrowserState(root)
    assert not state.can_navigate_up()
    assert not state.navigate_up()
    assert state.current_dir == root


def test_breadcrumbs_rebuild_path(sample_tree: Path) -> None:
    state = BrowserState(sample_tree / "Beta")
    crumbs = state.breadcrumbs()
    assert crumbs[0][0] == state.current_dir.anchor
    assert crumbs[-1] == ("Beta", state.current_dir)
    for label, path in crumbs[1:]:
        assert path.name == label


def test_breadcrumbs_at_root() -> None:
    root = Path(Path.cwd().anchor)
    assert BrowserState(root).breadcrumbs() == [(root.anchor, root)]


def test_unreadable_directory_degrades(tmp_path: Path) -> None:
    state = BrowserState(tmp_path)
    state.navigate_to(tmp_path / "missing")
    assert state.entries == []
    assert state.error is not None
    assert "missing" in state.error


def test_error_cleared_after_successful_read(sample_tree: Path) -> None:
    state = BrowserState(sample_tree)
    state.navigate_to(sample_tree / "missing")
    state.navigate_to(sample_tree)
    assert state.error is None
    assert state.entries


def test_resolve_start_dir(sample_tree: Path) -> None:
    assert resolve_start_dir(None) == Path.cwd()
    assert resolve_start_dir(sample_tree) == sample_tree.resolve()
    assert resolve_start_dir(sample_tree / "alpha.txt") == Path.cwd()


def test_navigate_to_relative_path_is_resolved(sample_tree: Path, monkeypatch) -> None:
    monkeypatch.chdir(sample_tree)
    state = BrowserState(sample_tree)
    state.navigate_to("Beta")
    assert state.current_dir.is_absolute()
    assert state.current_dir == sample_tree.resolve() / "Beta"
    assert [e.name for e in state.entries] == ["two", "one"]
