import json


def format_file_list(files: list[dict]) -> str:
    """
    Format file list as structured JSON for LLM consumption.

    Returns a JSON string with clear structure that LLMs can easily parse
    and understand, instead of hard-to-parse plain text.
    """
    if not files:
        return json.dumps({"status": "empty", "message": "No files found", "files": []}, indent=2)

    file_list = [
        {
            "name": file_info["name"],
            "type": "directory" if file_info["is_dir"] else "file",
            "size": file_info["size"],
            "path": file_info["path"],
            "user_created": file_info["is_user_created"],
        }
        for file_info in files
    ]
    return json.dumps({"status": "success", "count": len(file_list), "files": file_list}, indent=2)


def format_tree(tree_data: list[dict], root_name: str) -> str:
    """
    Format tree structure as structured JSON for LLM consumption.

    Each item keeps its depth, so the hierarchy can be rebuilt from the flat list.
    """
    if not tree_data:
        return json.dumps(
            {"status": "empty", "root": root_name, "message": "Directory is empty", "tree": []},
            indent=2,
        )

    tree_items = [
        {
            "name": item["name"],
            "type": "directory" if item["is_dir"] else "file",
            "depth": item["depth"],
            "path": item["path"],
        }
        for item in tree_data
    ]
    return json.dumps(
        {"status": "success", "root": root_name, "count": len(tree_items), "tree": tree_items},
        indent=2,
    )


def format_search_results(results: list, max_results: int, max_byte_size: int) -> str:
    """
    Format search results as structured JSON, grouped by file.

    Output stops growing once `max_results` matches or `max_byte_size` bytes
    of matches have been emitted; `was_truncated` reports it.
    """
    if not results:
        return json.dumps({"status": "empty", "message": "No search results found", "results": []}, indent=2)

    grouped: dict[str, list] = {}
    for r in results:
        grouped.setdefault(r.file_path, []).append(r)

    was_limit = len(results) >= max_results
    byte_size = 0
    byte_limit_hit = False
    formatted_results = []

    for file_path, file_results in grouped.items():
        file_result = {"file": file_path, "matches": []}
        for r in file_results:
            match = {
                "line": r.match.strip(),
                "line_number": r.line_number,
                "context": {
                    "before": [line.strip() for line in r.before_context],
                    "after": [line.strip() for line in r.after_context],
                },
            }
            match_bytes = len(json.dumps(match).encode("utf-8"))
            if byte_size + match_bytes >= max_byte_size:
                was_limit = byte_limit_hit = True
                break
            byte_size += match_bytes
            file_result["matches"].append(match)

        if file_result["matches"]:
            formatted_results.append(file_result)
        if byte_limit_hit:
            break

    return json.dumps(
        {
            "status": "success",
            "total_results": len(results),
            "showing_results": sum(len(f["matches"]) for f in formatted_results),
            "was_truncated": was_limit,
            "results": formatted_results,
        },
        indent=2,
    )


TRUNCATED_MESSAGE = "<response clipped><NOTE>To save on context only part of this file has been shown to you.</NOTE>"
MAX_RESPONSE_LEN = 16000


def maybe_truncate(content: str, truncate_after: int | None = MAX_RESPONSE_LEN) -> str:
    """Truncate content and append a notice if content exceeds the specified length."""
    if not truncate_after or len(content) <= truncate_after:
        return content
    return content[:truncate_after] + TRUNCATED_MESSAGE
