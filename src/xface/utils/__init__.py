# ABOUTME: Utility modules for xface
# ABOUTME: Exports env expansion, filesystem and subprocess helpers

from xface.utils.env import expand_env_vars, expand_fields
from xface.utils.fs import copy_contents, delete_svn_folders, find_single_root, remove_path
from xface.utils.process import format_command, run_command

__all__ = [
    "expand_env_vars",
    "expand_fields",
    "copy_contents",
    "delete_svn_folders",
    "find_single_root",
    "remove_path",
    "format_command",
    "run_command",
]
