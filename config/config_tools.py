import os
from yacs.config import CfgNode as CN


def get_abspath(path: str, project_root: str):
    if path is None:
        return None
    if os.path.isabs(path):
        return path
    return os.path.normpath(os.path.join(project_root, path))


def expand_relative_paths(root_cfg: CN):
    """Make the paths of the config absolute, relative ones are taken from the repo root."""
    c = root_cfg
    c.OUTPUT_DIR = get_abspath(c.OUTPUT_DIR, c.SYSTEM.ROOT_DIR)
    return c
