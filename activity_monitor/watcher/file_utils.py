"""Path filtering for file system activity."""

import fnmatch
from pathlib import Path


def should_process_file(
    file_path: Path,
    project_path: Path,
    include_patterns: list[str],
    exclude_patterns: list[str],
) -> bool:
    """Check if a changed path counts as activity.

    Args:
        file_path: Path reported by the observer
        project_path: Root of the watched tree
        include_patterns: Glob patterns matched against the file name
        exclude_patterns: Glob or directory (trailing ``/``) patterns

    Returns:
        True if the path is inside the tree, included and not excluded
    """
    try:
        relative = file_path.relative_to(project_path)
    except ValueError:
        return False

    if not matches_patterns(file_path.name, include_patterns):
        return False

    return not matches_patterns(relative.as_posix(), exclude_patterns)


def matches_patterns(text: str, patterns: list[str]) -> bool:
    """Check if text matches any pattern in the list."""
    file_path = Path(text)

    for pattern in patterns:
        # Directory patterns match anywhere in the path
        if pattern.endswith("/"):
            if text.startswith(pattern) or f"/{pattern}" in f"/{text}":
                return True
        elif (
            fnmatch.fnmatch(text, pattern)
            or fnmatch.fnmatch(file_path.name, pattern)
            or any(fnmatch.fnmatch(part, pattern) for part in file_path.parts)
        ):
            return True
    return False
