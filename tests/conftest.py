"""Shared fixtures."""

from pathlib import Path

import pytest


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """A directory with mixed files and subdirectories.

    Layout::

        alpha.txt      (5 bytes)
        Beta/          (2 children)
        gamma/         (empty)
        zeta.bin       (2048 bytes)
    """
    (tmp_path / "alpha.txt").write_text("hello")
    (tmp_path / "zeta.bin").write_bytes(b"\0" * 2048)
    beta = tmp_path / "Beta"
    beta.mkdir()
    (beta / "one").write_text("1")
    (beta / "two").mkdir()
    (tmp_path / "gamma").mkdir()
    return tmp_path
