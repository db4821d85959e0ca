# Merge/override layering of web assets
import logging
from pathlib import Path

from xface.utils import copy_contents

logger = logging.getLogger(__name__)


def copy_merges(base_output_dir: Path, merges_root: Path, sub_path: str) -> bool:
    """Overlay merges/<sub_path> onto an output directory.

    ABOUTME: Missing sub-path is a no-op, not an error
    ABOUTME: Same-named destination files are overwritten

    Args:
        base_output_dir: Web-asset output directory
        merges_root: The project's merges/ directory
        sub_path: Layer name, e.g. "wp" or "wp8"

    Returns:
        True if a copy happened
    """
    source = Path(merges_root) / sub_path
    if not source.exists():
        return False

    logger.debug(f"Copying merges from {source} to {base_output_dir}")
    copy_contents(source, Path(base_output_dir))
    return True
