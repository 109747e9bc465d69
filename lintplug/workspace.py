"""Working directory resolution and scoping."""

import os
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional

from lintplug.errors import WorkspaceError
from lintplug.models import get_settings
from lintplug.utils import get_logger

logger = get_logger(__name__)


def resolve_working_dirs(
    chdir: Optional[str] = None, recursive: bool = False, config_name: Optional[str] = None
) -> List[Path]:
    """
    Resolve the working directories to process, in processing order.

    Args:
        chdir: Root directory (default: current directory)
        recursive: Collect every non-hidden directory under the root (the root
            included) that holds a config file
        config_name: Config file name marking a working directory

    Returns:
        Ordered list of directories, parents before children. In recursive
        mode the root is only included when it holds a config file

    Raises:
        WorkspaceError: If the root is not a directory or cannot be walked
    """
    root = Path(chdir or ".")
    if not root.is_dir():
        raise WorkspaceError(f"{root} is not a directory")

    if not recursive:
        return [root]

    config_name = config_name or get_settings().config_file
    dirs: List[Path] = []

    def _raise(error: OSError) -> None:
        raise WorkspaceError(f"failed to walk {error.filename}: {error.strerror}") from error

    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
        dirnames[:] = sorted(d for d in dirnames if not d.startswith("."))
        if config_name in filenames:
            dirs.append(Path(dirpath))

    logger.debug(f"Resolved {len(dirs)} working director(ies) under {root}")
    return dirs


@contextmanager
def working_directory(path: Path) -> Iterator[Path]:
    """
    Change the process working directory for the duration of the block.

    The previous directory is restored on every exit path. The change is
    process-wide, so blocks must not run concurrently.

    Raises:
        WorkspaceError: If the directory cannot be entered
    """
    previous = os.getcwd()
    try:
        os.chdir(path)
    except OSError as e:
        raise WorkspaceError(f"cannot change to {path}: {e.strerror}") from e
    try:
        yield path
    finally:
        os.chdir(previous)
