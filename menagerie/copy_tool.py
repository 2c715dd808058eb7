"""Copy files, directories and symbolic links, like a simple ``cp -r``."""

from __future__ import annotations

import os
import shutil
import stat
import sys
from pathlib import Path
from typing import Sequence, Union

PathLike = Union[str, "os.PathLike[str]"]


def copy_dir_to(src: PathLike, dst: PathLike) -> None:
    """Copy the existing directory ``src`` to the path ``dst``."""
    src, dst = Path(src), Path(dst)
    if not dst.is_dir():
        dst.mkdir()
    with os.scandir(src) as entries:
        for entry in entries:
            mode = entry.stat(follow_symlinks=False).st_mode
            _copy_by_mode(Path(entry.path), mode, dst / entry.name)


def _symlink(target: str, dst: Path) -> None:
    if os.name != "posix":
        raise OSError(f"can't copy symbolic link: {target}")
    os.symlink(target, dst)


def _copy_by_mode(src: Path, mode: int, dst: Path) -> None:
    if stat.S_ISREG(mode):
        shutil.copyfile(src, dst)
        shutil.copymode(src, dst)
    elif stat.S_ISDIR(mode):
        copy_dir_to(src, dst)
    elif stat.S_ISLNK(mode):
        _symlink(os.readlink(src), dst)
    else:
        raise OSError(f"don't know how to copy: {src}")


def copy_to(src: PathLike, dst: PathLike) -> None:
    """Copy whatever is at ``src`` (a symlink is copied as a link) to ``dst``."""
    src = Path(src)
    _copy_by_mode(src, os.lstat(src).st_mode, Path(dst))


def copy_into(source: PathLike, destination: PathLike) -> None:
    """Copy ``source`` into the directory ``destination``, keeping its name."""
    src, dst = Path(source), Path(destination)
    name = src.name
    if name in ("", ".."):
        raise OSError(f"can't copy nameless directory: {src}")
    _copy_by_mode(src, os.stat(src).st_mode, dst / name)


def dwim_copy(source: PathLike, destination: PathLike) -> None:
    """Copy into ``destination`` if it is a directory, otherwise copy onto it."""
    src, dst = Path(source), Path(destination)
    if dst.is_dir():
        copy_into(src, dst)
    else:
        _copy_by_mode(src, os.stat(src).st_mode, dst)


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point: ``copy FILE... DESTINATION``."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        if len(args) < 2:
            print("usage: copy FILE... DESTINATION")
        elif len(args) == 2:
            dwim_copy(args[0], args[1])
        else:
            dst = Path(args[-1])
            if not dst.is_dir():
                raise OSError(f"target '{dst}' is not a directory")
            for source in args[:-1]:
                copy_into(source, dst)
    except OSError as err:
        print(f"error: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())