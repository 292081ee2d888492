import fnmatch
import re

from retro_terminal.filesystem.paths import get_file_name, is_within
from retro_terminal.filesystem.virtual_fs import VirtualFileSystem

from .constants import MAX_SEARCH_RESULTS
from .file_utils import should_ignore_path


class SearchResult:
    def __init__(self, file_path, line, line_number, match, before, after):
        self.file_path = file_path
        self.line = line
        self.line_number = line_number
        self.match = match
        self.before_context = before
        self.after_context = after


def _matches_pattern(name: str, file_pattern: str | None) -> bool:
    if not file_pattern:
        return True
    if file_pattern.startswith("*."):
        return name.endswith(file_pattern[1:])
    return fnmatch.fnmatchcase(name, file_pattern)


def search_virtual_files(
    fs: VirtualFileSystem,
    dir_path: str,
    query: str,
    file_pattern: str | None = None,
    max_results: int = MAX_SEARCH_RESULTS,
) -> list[SearchResult]:
    """
    Search the contents of every file below a virtual directory.

    Args:
        fs: The session's virtual filesystem.
        dir_path: Normalized directory to search in.
        query: Regex pattern; an invalid one is matched literally. Case is ignored.
        file_pattern: Optional file name filter (e.g., "*.txt").
        max_results: Stop after this many matching lines.

    Returns:
        List of SearchResult objects with one line of context on each side.
    """
    try:
        search_pattern = re.compile(query, re.IGNORECASE)
    except re.error:
        # Невалидный паттерн ищем как обычную строку
        search_pattern = re.compile(re.escape(query), re.IGNORECASE)

    results: list[SearchResult] = []
    for file_path, content in sorted(fs.get_files().items()):
        if len(results) >= max_results:
            break
        if not is_within(file_path, dir_path):
            continue
        # Скрытые файлы и директории пропускаем
        relative = file_path[len(dir_path):].lstrip("/")
        if any(should_ignore_path(part) for part in relative.split("/")):
            continue
        if not _matches_pattern(get_file_name(file_path), file_pattern):
            continue

        lines = content.split("\n")
        for line_index, line_text in enumerate(lines):
            if len(results) >= max_results:
                break
            if not search_pattern.search(line_text):
                continue
            results.append(
                SearchResult(
                    file_path=file_path,
                    line=line_text,
                    line_number=line_index + 1,
                    match=line_text,
                    before=lines[max(0, line_index - 1) : line_index],
                    after=lines[line_index + 1 : line_index + 2],
                )
            )
    return results
