"""
In-memory filesystem backing a terminal session.

Files live in one flat mapping from normalized path to content. Directories
exist either because a file path implies them or because they were registered
explicitly (mkdir, or as ancestors of a saved file). Deleting never drops data:
entries are replanted under a timestamped directory below `~/.trash`.

Every public method is total. Failures come back as `FsResult` values, lookups
that miss come back as `None`.
"""

import logging
import time
from collections.abc import Callable, Mapping

from retro_terminal.filesystem.paths import (
    DEFAULT_DISPLAY_HOME,
    HOME,
    TRASH_ROOT,
    ancestors,
    collation_key,
    get_directory,
    get_file_name,
    get_file_type,
    is_root,
    is_within,
    normalize_path,
    relative_to_home,
)
from retro_terminal.models.filesystem import DirEntry, FlatEntry, FsErrorCode, FsResult, GrepMatch

logger = logging.getLogger(__name__)


def _epoch_millis() -> int:
    return int(time.time() * 1000)


class VirtualFileSystem:
    """Single source of truth for one session's files and directories."""

    def __init__(
        self,
        seed: Mapping[str, str] | None = None,
        clock: Callable[[], int] = _epoch_millis,
        display_home: str = DEFAULT_DISPLAY_HOME,
    ) -> None:
        self._seed: dict[str, str] = dict(seed or {})
        self._clock = clock
        self.display_home = display_home
        self._files: dict[str, str] = {}
        self._known_dirs: set[str] = set()
        self._user_files: set[str] = set()
        self._user_dirs: set[str] = set()
        self._last_trash_stamp = 0
        self.reset()

    # --- Paths ---

    def normalize_path(self, path: str, cwd: str = HOME) -> str:
        return normalize_path(path, cwd, self.display_home)

    def _norm(self, path: str) -> str:
        return self.normalize_path(path)

    def _register_directory(self, path: str) -> None:
        if is_root(path):
            return
        if path not in self._known_dirs:
            self._known_dirs.add(path)
            self._user_dirs.add(path)

    def _register_with_ancestors(self, path: str) -> None:
        for ancestor in ancestors(path):
            self._register_directory(ancestor)
        self._register_directory(path)

    def _file_ancestor(self, path: str) -> str | None:
        """The outermost ancestor of `path` that is a stored file, if any."""
        for ancestor in ancestors(path):
            if ancestor in self._files:
                return ancestor
        return None

    def _not_a_directory(self, path: str) -> FsResult | None:
        blocker = self._file_ancestor(path)
        if blocker is None:
            return None
        return FsResult.fail(FsErrorCode.NOT_A_DIRECTORY, f"{blocker} is a file")

    # --- Queries ---

    def get_files(self) -> dict[str, str]:
        """Returns a snapshot copy of every stored file."""
        return dict(self._files)

    def get_user_files(self) -> list[str]:
        return sorted(self._user_files)

    def get_user_dirs(self) -> list[str]:
        return sorted(self._user_dirs)

    def file_exists(self, path: str) -> bool:
        return self._norm(path) in self._files

    def directory_exists(self, path: str) -> bool:
        target = self._norm(path)
        if target == HOME or target in self._known_dirs:
            return True
        return any(is_within(get_directory(file_path), target) for file_path in self._files)

    def get_file_content(self, path: str) -> str | None:
        return self._files.get(self._norm(path))

    def get_file_size(self, path: str) -> int | None:
        content = self.get_file_content(path)
        if content is None:
            return None
        return len(content)

    def count_lines(self, path: str) -> int | None:
        content = self.get_file_content(path)
        if content is None:
            return None
        if content == "":
            return 0
        return len(content.split("\n"))

    def count_words(self, path: str) -> int | None:
        content = self.get_file_content(path)
        if content is None:
            return None
        return len(content.split())

    def search_in_file(self, path: str, pattern: str) -> list[GrepMatch] | None:
        content = self.get_file_content(path)
        if content is None:
            return None
        needle = pattern.lower()
        return [
            GrepMatch(line_num=index + 1, content=line)
            for index, line in enumerate(content.split("\n"))
            if needle in line.lower()
        ]

    def get_head(self, path: str, n: int = 10) -> str | None:
        content = self.get_file_content(path)
        if content is None:
            return None
        if n <= 0:
            return ""
        return "\n".join(content.split("\n")[:n])

    def get_tail(self, path: str, n: int = 10) -> str | None:
        content = self.get_file_content(path)
        if content is None:
            return None
        if n <= 0:
            return ""
        return "\n".join(content.split("\n")[-n:])

    # --- Mutations ---

    def save_file(self, path: str, content: str) -> FsResult:
        """
        Creates or overwrites a file, registering its ancestors as directories.

        Precondition: `path` must not be an existing directory. Callers check
        `directory_exists` first; this method does not reject it. A path below
        an existing file fails with `NOT_A_DIRECTORY`.
        """
        target = self._norm(path)
        failure = self._not_a_directory(target)
        if failure:
            return failure
        is_new = target not in self._files
        for ancestor in ancestors(target):
            self._register_directory(ancestor)
        self._files[target] = content
        if is_new:
            self._user_files.add(target)
        logger.debug(f"Saved {target} ({len(content)} chars, new={is_new})")
        return FsResult.ok(is_new=is_new, path=target)

    def create_file(self, path: str) -> FsResult:
        target = self._norm(path)
        if target in self._files:
            return FsResult.fail(FsErrorCode.ALREADY_EXISTS, "File already exists")
        return self.save_file(target, "")

    def append_to_file(self, path: str, content: str) -> FsResult:
        target = self._norm(path)
        if target not in self._files:
            return self.save_file(target, content)
        self._files[target] += "\n" + content
        return FsResult.ok(path=target)

    def create_directory(self, path: str) -> FsResult:
        target = self._norm(path)
        if target in self._files:
            return FsResult.fail(FsErrorCode.ALREADY_A_FILE, "A file with this name already exists")
        failure = self._not_a_directory(target)
        if failure:
            return failure
        self._register_with_ancestors(target)
        return FsResult.ok(path=target)

    def move_file(self, src: str, dst: str) -> FsResult:
        source, dest = self._norm(src), self._norm(dst)
        if source not in self._files:
            return FsResult.fail(FsErrorCode.NOT_FOUND, "Source file not found")
        failure = self._not_a_directory(dest)
        if failure:
            return failure
        if dest in self._files:
            return FsResult.fail(FsErrorCode.ALREADY_EXISTS, "Destination file already exists")
        if self.directory_exists(dest):
            return FsResult.fail(FsErrorCode.IS_A_DIRECTORY, "Destination is a directory")

        self._files[dest] = self._files.pop(source)
        if source in self._user_files:
            self._user_files.discard(source)
            self._user_files.add(dest)
        return FsResult.ok(path=dest)

    def copy_file(self, src: str, dst: str) -> FsResult:
        """Copies a file. An existing destination file is overwritten without complaint."""
        source, dest = self._norm(src), self._norm(dst)
        if source not in self._files:
            return FsResult.fail(FsErrorCode.NOT_FOUND, "Source file not found")
        failure = self._not_a_directory(dest)
        if failure:
            return failure
        if dest not in self._files and self.directory_exists(dest):
            return FsResult.fail(FsErrorCode.IS_A_DIRECTORY, "Destination is a directory")

        self._files[dest] = self._files[source]
        self._user_files.add(dest)
        return FsResult.ok(path=dest)

    def _check_subtree_transfer(self, source: str, dest: str) -> FsResult | None:
        if is_root(source):
            return FsResult.fail(FsErrorCode.REFUSING_ROOT_DELETION, "Refusing to move root directory")
        if source in self._files or not self.directory_exists(source):
            return FsResult.fail(FsErrorCode.NOT_FOUND, "Directory not found")
        if dest in self._files or self.directory_exists(dest):
            return FsResult.fail(FsErrorCode.ALREADY_EXISTS, "Destination already exists")
        failure = self._not_a_directory(dest)
        if failure:
            return failure
        if is_within(dest, source):
            return FsResult.fail(FsErrorCode.INVALID_OPERAND, "Cannot move a directory into itself")
        return None

    def _replant(self, path: str, source: str, dest: str) -> str:
        return dest + path[len(source):]

    def move_directory(self, src: str, dst: str) -> FsResult:
        source, dest = self._norm(src), self._norm(dst)
        failure = self._check_subtree_transfer(source, dest)
        if failure:
            return failure

        files = {
            (self._replant(fp, source, dest) if is_within(fp, source) else fp): content
            for fp, content in self._files.items()
        }
        moved_dirs = {d for d in self._known_dirs if is_within(d, source)}
        self._files = files
        self._user_files = {
            self._replant(fp, source, dest) if is_within(fp, source) else fp for fp in self._user_files
        }
        self._known_dirs -= moved_dirs
        self._user_dirs -= moved_dirs
        self._register_with_ancestors(dest)
        for directory in moved_dirs:
            self._register_directory(self._replant(directory, source, dest))
        return FsResult.ok(path=dest)

    def copy_directory(self, src: str, dst: str) -> FsResult:
        source, dest = self._norm(src), self._norm(dst)
        failure = self._check_subtree_transfer(source, dest)
        if failure:
            return failure

        copies = {
            self._replant(fp, source, dest): content
            for fp, content in self._files.items()
            if is_within(fp, source)
        }
        nested_dirs = [d for d in self._known_dirs if is_within(d, source)]
        self._register_with_ancestors(dest)
        for directory in nested_dirs:
            self._register_directory(self._replant(directory, source, dest))
        self._files.update(copies)
        self._user_files.update(copies)
        return FsResult.ok(path=dest)

    def _next_trash_prefix(self) -> str:
        stamp = max(self._clock(), self._last_trash_stamp + 1)
        self._last_trash_stamp = stamp
        return f"{TRASH_ROOT}/{stamp}"

    def delete_file(self, path: str) -> FsResult:
        target = self._norm(path)
        if target not in self._files:
            return FsResult.fail(FsErrorCode.NOT_FOUND, "File not found")

        trash_path = f"{self._next_trash_prefix()}/{relative_to_home(target)}"
        for ancestor in ancestors(trash_path):
            self._register_directory(ancestor)
        self._files[trash_path] = self._files.pop(target)
        self._user_files.discard(target)
        self._user_files.add(trash_path)
        logger.info(f"Moved {target} to {trash_path}")
        return FsResult.ok(path=target, trash_path=trash_path)

    def delete_directory(self, path: str) -> FsResult:
        """
        Moves a whole subtree into the trash.

        The resulting state is computed aside and swapped in at once, so a
        reader never observes a half-moved tree.
        """
        target = self._norm(path)
        if is_root(target):
            return FsResult.fail(FsErrorCode.REFUSING_ROOT_DELETION, "Refusing to remove root directory")
        if target in self._files or not self.directory_exists(target):
            return FsResult.fail(FsErrorCode.NOT_FOUND, "Directory not found")

        prefix = self._next_trash_prefix()
        files: dict[str, str] = {}
        user_files = set(self._user_files)
        for file_path, content in self._files.items():
            if not is_within(file_path, target):
                files[file_path] = content
                continue
            trash_path = f"{prefix}/{relative_to_home(file_path)}"
            files[trash_path] = content
            user_files.discard(file_path)
            user_files.add(trash_path)

        removed_dirs = {d for d in self._known_dirs if is_within(d, target)}
        known_dirs = self._known_dirs - removed_dirs
        user_dirs = self._user_dirs - removed_dirs
        trash_dirs = {f"{prefix}/{relative_to_home(d)}" for d in removed_dirs | {target}}
        for directory in sorted(trash_dirs):
            for ancestor in [*ancestors(directory), directory]:
                known_dirs.add(ancestor)
                user_dirs.add(ancestor)

        self._files, self._user_files = files, user_files
        self._known_dirs, self._user_dirs = known_dirs, user_dirs
        trash_path = f"{prefix}/{relative_to_home(target)}"
        logger.info(f"Moved directory {target} to {trash_path}")
        return FsResult.ok(path=target, trash_path=trash_path)

    def reset(self) -> None:
        """Restores the seed files and forgets everything created since."""
        self._files = {self._norm(p): content for p, content in self._seed.items()}
        self._known_dirs = set()
        self._user_files = set()
        self._user_dirs = set()
        for file_path in self._files:
            self._known_dirs.update(ancestors(file_path))

    # --- Listings ---

    def _sort_entries(self, entries: list) -> list:
        return sorted(entries, key=lambda e: (not e.is_directory, collation_key(e.name)))

    def list_files(self, directory: str = HOME) -> list[DirEntry]:
        """Direct children of `directory`, directories first."""
        target = self._norm(directory)
        entries: list[DirEntry] = []
        seen_dirs: set[str] = set()

        def add_dir(dir_path: str) -> None:
            if dir_path in seen_dirs:
                return
            seen_dirs.add(dir_path)
            entries.append(
                DirEntry(
                    name=get_file_name(dir_path) + "/",
                    path=dir_path,
                    type="directory",
                    is_user_created=dir_path in self._user_dirs,
                    is_directory=True,
                )
            )

        for dir_path in self._known_dirs:
            if dir_path != target and get_directory(dir_path) == target:
                add_dir(dir_path)

        prefix = target if target.endswith("/") else target + "/"
        for file_path in self._files:
            parent = get_directory(file_path)
            if parent == target:
                name = get_file_name(file_path)
                entries.append(
                    DirEntry(
                        name=name,
                        path=file_path,
                        type=get_file_type(name),
                        is_user_created=file_path in self._user_files,
                        is_directory=False,
                    )
                )
            elif parent.startswith(prefix):
                child = parent[len(prefix):].split("/")[0]
                add_dir(prefix + child)

        return self._sort_entries(entries)

    def get_file_structure(self) -> list[FlatEntry]:
        """Depth-first pre-order flattening of the home tree."""
        directories = {d for d in self._known_dirs if is_within(d, HOME)}
        for file_path in self._files:
            if is_within(file_path, HOME):
                directories.update(ancestors(file_path))

        children: dict[str, list[FlatEntry]] = {HOME: []}
        nodes: dict[str, FlatEntry] = {}
        for dir_path in directories:
            nodes[dir_path] = FlatEntry(
                name=get_file_name(dir_path) + "/",
                type="folder",
                level=0,
                path=dir_path,
                parent=get_directory(dir_path),
                is_user_created=dir_path in self._user_dirs,
                is_directory=True,
            )
            children.setdefault(dir_path, [])
        for file_path in self._files:
            if is_within(file_path, HOME) and file_path != HOME:
                name = get_file_name(file_path)
                nodes[file_path] = FlatEntry(
                    name=name,
                    type="file",
                    level=0,
                    path=file_path,
                    parent=get_directory(file_path),
                    is_user_created=file_path in self._user_files,
                    file_type=get_file_type(name),
                )
        for node in nodes.values():
            children.setdefault(node.parent, []).append(node)

        result = [FlatEntry(name=HOME, type="folder", level=0, path=HOME, parent=None, is_directory=True)]

        def traverse(dir_path: str, level: int) -> None:
            for child in self._sort_entries(children.get(dir_path, [])):
                result.append(child.model_copy(update={"level": level}))
                if child.is_directory:
                    traverse(child.path, level + 1)

        traverse(HOME, 1)
        return result
