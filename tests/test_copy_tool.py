import os

import pytest

from menagerie.copy_tool import copy_dir_to, copy_into, copy_to, dwim_copy, main


@pytest.fixture
def tree(tmp_path):
    root = tmp_path / "a"
    (root / "sub").mkdir(parents=True)
    (root / "f.txt").write_text("alpha")
    (root / "sub" / "g.txt").write_text("beta")
    os.symlink("f.txt", root / "link")
    return root


def test_copy_dir_to_copies_everything(tree, tmp_path):
    dst = tmp_path / "b"
    copy_dir_to(tree, dst)
    assert (dst / "f.txt").read_text() == "alpha"
    assert (dst / "sub" / "g.txt").read_text() == "beta"
    assert os.readlink(dst / "link") == "f.txt"


def test_copy_to_file(tmp_path):
    src = tmp_path / "src.txt"
    src.write_bytes(b"payload")
    dst = tmp_path / "dst.txt"
    copy_to(src, dst)
    assert dst.read_bytes() == src.read_bytes()


def test_copy_to_keeps_symlink_as_link(tree, tmp_path):
    dst = tmp_path / "copied_link"
    copy_to(tree / "link", dst)
    assert dst.is_symlink()
    assert os.readlink(dst) == "f.txt"


def test_dwim_copy_into_directory(tree, tmp_path):
    target = tmp_path / "target"
    target.mkdir()
    dwim_copy(tree / "f.txt", target)
    assert (target / "f.txt").read_text() == "alpha"


def test_dwim_copy_onto_new_path(tree, tmp_path):
    dst = tmp_path / "renamed"
    dwim_copy(tree, dst)
    assert sorted(p.name for p in dst.iterdir()) == sorted(p.name for p in tree.iterdir())


def test_copy_into_nameless_directory(tmp_path):
    with pytest.raises(OSError, match="can't copy nameless directory"):
        copy_into("..", tmp_path)


def test_copy_missing_source(tmp_path):
    with pytest.raises(FileNotFoundError):
        dwim_copy(tmp_path / "absent", tmp_path / "out")


def test_main_usage(capsys):
    assert main([]) == 0
    assert "usage: copy FILE... DESTINATION" in capsys.readouterr().out


def test_main_many_sources_need_directory(tree, tmp_path, capsys):
    not_dir = tmp_path / "plain.txt"
    not_dir.write_text("x")
    assert main([str(tree / "f.txt"), str(tree / "sub"), str(not_dir)]) == 1
    assert "is not a directory" in capsys.readouterr().err


def test_main_many_sources(tree, tmp_path):
    target = tmp_path / "target"
    target.mkdir()
    assert main([str(tree / "f.txt"), str(tree / "sub"), str(target)]) == 0
    assert (target / "f.txt").read_text() == "alpha"
    assert (target / "sub" / "g.txt").read_text() == "beta"