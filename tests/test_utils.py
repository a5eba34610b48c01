import os

from coursesite import utils


def test_replace_extension():
    assert utils.replace_extension("week-1.md", ".html") == "week-1.html"
    assert utils.replace_extension("notes/intro", ".html") == "notes/intro.html"


def test_write_if_changed_skips_identical(tmp_path):
    target = tmp_path / "out" / "page.html"
    assert utils.write_if_changed(target, "<p>é</p>") is True
    assert target.read_text(encoding="utf-8") == "<p>é</p>"

    os.utime(target, ns=(1, 1))
    assert utils.write_if_changed(target, "<p>é</p>") is False
    assert target.stat().st_mtime_ns == 1

    assert utils.write_if_changed(target, "<p>new</p>") is True
    assert target.read_text(encoding="utf-8") == "<p>new</p>"


def test_copy_if_changed(tmp_path):
    src = tmp_path / "logo.png"
    src.write_bytes(b"\x89PNG")
    dest = tmp_path / "out" / "static" / "logo.png"
    assert utils.copy_if_changed(src, dest) is True
    assert dest.read_bytes() == b"\x89PNG"
    assert utils.copy_if_changed(src, dest) is False
