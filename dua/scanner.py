from __future__ import annotations
import logging
import os
import time
from typing import List

from .config import FILE_ERROR_POLICIES, ON_FILE_ERROR_ABORT
from .models import Node, NodeKind, ScanResult

log = logging.getLogger(__name__)


class WalkError(Exception):
    def __init__(self, path: str, message: str):
        super().__init__(message)
        self.path = path


class DirectoryAccessError(WalkError):
    """A directory could not be opened or listed.

    Below the root this only leaves the directory's subtree partial; the walk
    carries on with its siblings.
    """


class FileStatError(WalkError):
    """The size of a regular file could not be read. Aborts the scan unless
    the ``skip`` policy is in effect."""


def _list_dir(path: str) -> List[os.DirEntry]:
    # the listing handle is released before any entry is visited
    with os.scandir(path) as it:
        return list(it)


def _classify(entry: os.DirEntry) -> NodeKind:
    # symlinks are never followed: a link to a directory is "other"
    if entry.is_dir(follow_symlinks=False):
        return NodeKind.DIRECTORY
    if entry.is_file(follow_symlinks=False):
        return NodeKind.FILE
    return NodeKind.OTHER


def _file_size(entry: os.DirEntry) -> int:
    return int(entry.stat(follow_symlinks=False).st_size)


def scan_path(path: str, on_file_error: str = ON_FILE_ERROR_ABORT) -> ScanResult:
    """Walk ``path`` depth-first and mirror it as a tree of :class:`Node`.

    Every I/O failure is logged and collected in ``ScanResult.errors``.
    Raises :class:`DirectoryAccessError` when the root itself cannot be listed
    and :class:`FileStatError` on the first unreadable file under the
    ``abort`` policy.
    """
    if on_file_error not in FILE_ERROR_POLICIES:
        raise ValueError(f"unknown file error policy: {on_file_error!r}")

    t0 = time.time()
    files = 0
    dirs = 0
    others = 0
    errors: List[str] = []

    def report(msg: str):
        log.error("%s", msg)
        errors.append(msg)

    def walk(node: Node):
        nonlocal files, dirs, others
        log.debug("walking %s", node.path)
        try:
            entries = _list_dir(node.path)
        except OSError as e:
            report(str(e))
            raise DirectoryAccessError(node.path, str(e)) from e

        node.kind = NodeKind.DIRECTORY
        dirs += 1

        for entry in entries:
            child_path = os.path.join(node.path, entry.name)
            try:
                kind = _classify(entry)
            except OSError as e:
                report(str(e))
                kind = NodeKind.OTHER

            if kind is NodeKind.DIRECTORY:
                child = Node(path=child_path, kind=kind)
                node.children.append(child)
                try:
                    walk(child)
                except DirectoryAccessError:
                    continue
            elif kind is NodeKind.FILE:
                try:
                    size = _file_size(entry)
                except OSError as e:
                    report(str(e))
                    if on_file_error == ON_FILE_ERROR_ABORT:
                        raise FileStatError(child_path, str(e)) from e
                    size = 0
                node.children.append(Node(path=child_path, kind=kind, own_size=size))
                files += 1
            else:
                node.children.append(Node(path=child_path, kind=kind))
                others += 1

    root = Node(path=path)
    walk(root)

    return ScanResult(
        root=root,
        files=files,
        dirs=dirs,
        others=others,
        errors=errors,
        elapsed_sec=time.time() - t0,
    )


def build_tree(path: str, on_file_error: str = ON_FILE_ERROR_ABORT) -> Node:
    return scan_path(path, on_file_error=on_file_error).root
