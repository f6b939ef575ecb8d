"""Selecting the files to analyse and grouping them by language."""

from __future__ import annotations

import hashlib
import os
import sys
from typing import Iterable, Iterator

from cloctally.definitions import EXTS, DefinedLanguages
from cloctally.filetype import get_file_type
from cloctally.language import Language
from cloctally.options import ClocOptions

_VCS_DIRS = (".bzr", ".cvs", ".hg", ".git", ".svn")


def check_md5_sum(path: str, cache: set[str]) -> bool:
    """Return ``True`` if ``path`` should be ignored as a duplicate.

    Unreadable files are ignored too. The file's digest is added to
    ``cache`` the first time it is seen.
    """
    try:
        with open(path, "rb") as fp:
            content = fp.read()
    except OSError:
        return True
    digest = hashlib.md5(content).hexdigest()
    if digest in cache:
        return True
    cache.add(digest)
    return False


def is_vcs_dir(path: str) -> bool:
    """Whether the path mentions a version-control directory."""
    if len(path) > 1 and path[0] == os.sep:
        path = path[1:]
    return any(name in path for name in _VCS_DIRS)


def check_default_ignore(path: str, is_dir: bool, is_vcs: bool) -> bool:
    """Whether a walked entry is skipped regardless of options."""
    if is_dir:
        return True
    return not is_vcs and is_vcs_dir(path)


def check_option_match(path: str, name: str, options: ClocOptions) -> bool:
    """Apply the match and not-match patterns to a file and its directory."""
    target = path if options.fullpath else name
    if options.re_not_match is not None and options.re_not_match.search(target):
        return False
    if options.re_match is not None and not options.re_match.search(target):
        return False
    directory = _dir_of(path)
    if options.re_not_match_dir is not None and options.re_not_match_dir.search(directory):
        return False
    if options.re_match_dir is not None and not options.re_match_dir.search(directory):
        return False
    return True


def get_all_files(
    paths: Iterable[str], languages: DefinedLanguages, options: ClocOptions
) -> dict[str, Language]:
    """Walk ``paths`` and group every countable file by language name."""
    result: dict[str, Language] = {}
    seen: set[str] = set()

    for root in paths:
        vcs_in_root = is_vcs_dir(root)
        for path, is_dir in _walk(root):
            if check_default_ignore(path, is_dir, vcs_in_root):
                continue
            name = os.path.basename(path.rstrip(os.sep)) or path
            if not check_option_match(path, name, options):
                continue

            ext = get_file_type(path, options)
            if ext is None or ext not in EXTS:
                continue
            target = EXTS[ext]
            if target in options.exclude_exts:
                continue
            if options.include_langs and target not in options.include_langs:
                continue
            if not options.skip_duplicated and check_md5_sum(path, seen):
                if options.debug:
                    print(f"[ignore={path}] find same md5")
                continue

            if target not in result:
                result[target] = languages[target].copy_definition()
            result[target].files.append(path)
    return result


def _walk(root: str) -> Iterator[tuple[str, bool]]:
    """Yield ``(path, is_dir)`` for root and everything below it, in name order.

    Symbolic links are not followed. Errors are reported on stderr and
    the walk goes on.
    """
    try:
        is_dir = os.path.isdir(root) and not os.path.islink(root)
        os.lstat(root)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return
    yield root, is_dir
    if is_dir:
        yield from _walk_dir(root)


def _walk_dir(directory: str) -> Iterator[tuple[str, bool]]:
    try:
        with os.scandir(directory) as entries:
            children = sorted(entries, key=lambda entry: entry.name)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return
    for entry in children:
        path = os.path.normpath(os.path.join(directory, entry.name))
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError as exc:
            print(exc, file=sys.stderr)
            continue
        yield path, is_dir
        if is_dir:
            yield from _walk_dir(path)


def _dir_of(path: str) -> str:
    """Directory part of ``path``, ``"."`` when there is none."""
    return os.path.normpath(os.path.dirname(path) or ".")