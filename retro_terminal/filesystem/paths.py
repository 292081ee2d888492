"""Pure string helpers for virtual paths."""

HOME = "~"
ROOT = "/"
ROOT_MARKERS = (HOME, ROOT)
TRASH_ROOT = "~/.trash"
DEFAULT_DISPLAY_HOME = "/home/guest"

FILE_TYPES = {
    "txt": "text",
    "md": "markdown",
    "js": "javascript",
    "jsx": "javascript",
    "ts": "typescript",
    "tsx": "typescript",
    "py": "python",
    "json": "json",
    "html": "html",
    "css": "css",
    "conf": "config",
    "cfg": "config",
    "log": "log",
    "dat": "data",
    "sh": "shell",
    "bash": "shell",
}


def normalize_path(path: str, cwd: str = HOME, display_home: str = DEFAULT_DISPLAY_HOME) -> str:
    """
    Resolves a user-supplied path against the working directory.

    Args:
        path: The path as typed; relative, `~`-rooted or `/`-rooted.
        cwd: The normalized working directory used for relative paths.
        display_home: The absolute home shown by `pwd`; it folds back into `~`.

    Returns:
        The canonical absolute form. Applying it twice yields the same string.
    """
    path = path.strip()
    if not path:
        return cwd
    if path == HOME:
        return HOME

    if display_home and (path == display_home or path.startswith(display_home + "/")):
        path = HOME + path[len(display_home):]

    if not path.startswith(HOME) and not path.startswith(ROOT):
        path = f"{cwd}/{path}"

    if path.startswith(ROOT):
        root, rest = ROOT, path[1:]
    else:
        root, _, rest = path.partition("/")

    segments: list[str] = []
    for segment in rest.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if segments:
                segments.pop()
            continue
        segments.append(segment)

    if not segments:
        return root
    if root == ROOT:
        return ROOT + "/".join(segments)
    return root + "/" + "/".join(segments)


def is_root(path: str) -> bool:
    return path in ROOT_MARKERS


def get_file_name(path: str) -> str:
    return path.split("/")[-1]


def get_directory(path: str) -> str:
    """Parent of a normalized path; roots are their own parent."""
    if is_root(path):
        return path
    parent, sep, _ = path.rpartition("/")
    if not sep:
        return HOME
    return parent or ROOT


def ancestors(path: str) -> list[str]:
    """Every directory above `path`, outermost first, excluding the root marker."""
    result = []
    current = get_directory(path)
    while not is_root(current):
        result.append(current)
        current = get_directory(current)
    result.reverse()
    return result


def is_within(path: str, directory: str) -> bool:
    """True when `path` equals `directory` or is nested below it."""
    if path == directory:
        return True
    prefix = directory if directory == ROOT else directory + "/"
    return path.startswith(prefix)


def relative_to_home(path: str) -> str:
    """Strips the root marker so a path can be replanted under another prefix."""
    if path.startswith(HOME + "/"):
        return path[2:]
    if path.startswith(ROOT):
        return path[1:]
    return path.lstrip("~")


def get_file_type(filename: str) -> str:
    if "." not in filename:
        return "text"
    ext = filename.rsplit(".", 1)[-1].lower()
    return FILE_TYPES.get(ext, "text")


def collation_key(name: str) -> tuple[str, str]:
    """
    Sort key approximating a locale-aware compare.

    Names compare case-insensitively first; on a tie the lowercase spelling
    comes before the uppercase one, matching browser `localeCompare`.
    """
    return name.casefold(), name.swapcase()


def to_display_path(path: str, display_home: str = DEFAULT_DISPLAY_HOME) -> str:
    """Maps `~`-rooted paths to the absolute home shown by `pwd`."""
    if path == HOME:
        return display_home
    if path.startswith(HOME + "/"):
        return display_home + path[1:]
    return path
