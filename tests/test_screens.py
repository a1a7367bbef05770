import io

import pytest

from sanduba.screens import Screen, read_screen, show_screen


def test_read_screen_uses_its_file(tmp_path):
    (tmp_path / "logoscreen.txt").write_text("SANDUBA\n###\n", encoding="utf-8")
    assert read_screen(Screen.LOGO, tmp_path) == "SANDUBA\n###\n"


def test_show_screen_writes_text(tmp_path):
    art = "== Relatório ==\n"
    (tmp_path / Screen.FINANCE.filename).write_text(art, encoding="utf-8")
    out = io.StringIO()
    show_screen(Screen.FINANCE, tmp_path, out)
    assert out.getvalue() == art


def test_missing_screen_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_screen(Screen.CART, tmp_path)


def test_each_screen_reads_its_own_file(tmp_path):
    for screen in Screen:
        (tmp_path / screen.filename).write_text(screen.name, encoding="utf-8")
    assert [read_screen(s, tmp_path) for s in Screen] == [s.name for s in Screen]