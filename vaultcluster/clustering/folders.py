"""Folder indexing and folder-derived cluster names."""

import re
from collections.abc import Iterable

from vaultcluster.domain.vault import FileInfo

ROOT_NAME = "Root"
_ROOT_PATHS = ("", "/")


def is_root(folder: str) -> bool:
    return folder in _ROOT_PATHS


def folder_depth(folder: str) -> int:
    """Number of path segments in a folder, 0 for root."""
    return len([part for part in folder.split("/") if part])


def get_folders_by_depth(files: Iterable[FileInfo]) -> list[str]:
    """Get the distinct non-root folders, deepest first.

    Ties are ordered lexicographically so the result does not depend on the
    order the files were listed in.

    Args:
        files: Files to collect folders from

    Returns:
        Folder paths sorted by descending depth
    """
    folders = {file.folder for file in files if not is_root(file.folder)}
    return sorted(folders, key=lambda folder: (-folder_depth(folder), folder))


def is_subfolder_of(candidate: str, parent: str) -> bool:
    """Check whether a folder is strictly nested under another.

    Both "" and "/" denote the vault root, which is the parent of every
    non-root folder. Matching is done on whole path segments, so "abc" is not
    a subfolder of "ab", and no folder is a subfolder of itself.
    """
    if is_root(parent):
        return not is_root(candidate)
    return candidate.rstrip("/").startswith(f"{parent.rstrip('/')}/")


def format_folder_name(name: str) -> str:
    """Turn a folder segment such as "my_folder-name" into "My Folder Name"."""
    spaced = re.sub(r"[-_]", " ", name)
    return re.sub(r"\b\w", lambda match: match.group(0).upper(), spaced).strip()


def generate_candidate_names(folder: str) -> list[str]:
    """Generate human readable name suggestions for a folder.

    The deepest segment comes first. Nested folders also get the full path
    ("Work / Projects") and a parent-qualified variant ("Work: Projects").
    """
    parts = [part for part in folder.split("/") if part]
    if not parts:
        return [ROOT_NAME]

    deepest = format_folder_name(parts[-1])
    names = [deepest]

    if len(parts) > 1:
        names.append(" / ".join(format_folder_name(part) for part in parts))
        names.append(f"{format_folder_name(parts[-2])}: {deepest}")

    return names
