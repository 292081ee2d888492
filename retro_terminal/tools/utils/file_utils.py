from retro_terminal.filesystem.virtual_fs import VirtualFileSystem
from retro_terminal.models.filesystem import DirEntry, FlatEntry


def should_ignore_path(name: str) -> bool:
    """Hidden entries (the trash included) stay out of explorer listings."""
    return name.startswith(".")


def format_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


def get_file_info(fs: VirtualFileSystem, entry: DirEntry | FlatEntry) -> dict:
    """Get display information about a virtual file or directory."""
    size = 0 if entry.is_directory else fs.get_file_size(entry.path) or 0
    return {
        "name": entry.name.rstrip("/"),
        "is_dir": entry.is_directory,
        "size": "-" if entry.is_directory else format_size(size),
        "raw_size": size,
        "path": entry.path,
        "is_user_created": entry.is_user_created,
    }
