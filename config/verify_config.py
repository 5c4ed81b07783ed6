import os
from typing import List, Dict, Union, Tuple
from yacs.config import CfgNode as CN
from tools import log
from unionfind.operations import parse_operation, MODES


def _is(_type):
    def check_type(x):
        return isinstance(x, _type)
    return check_type


def _is_count(x):
    return _is(int)(x) and not _is(bool)(x) and x >= 0


def _is_operation(x):
    try:
        parse_operation(x)
    except ValueError:
        return False
    return True


system_checks = {
    "CFG_DIR": os.path.isdir,
    "ROOT_DIR": os.path.isdir,
}

global_checks = {
    "OUTPUT_DIR": lambda x: _is(str)(x) and (os.path.isdir(x) or os.path.isdir(os.path.dirname(os.path.normpath(x)))),
}

forest_checks = {
    "SIZE": _is_count,
    "PARENTS": lambda x: _is(list)(x) and all(y is None or _is_count(y) for y in x),
    "MODE": lambda x: x in MODES,
    "OPERATIONS": lambda x: _is(list)(x) and all(_is(str)(y) and _is_operation(y) for y in x),
}

benchmark_checks = {
    "ENABLED": _is(bool),
    "SIZE": lambda x: _is_count(x) and x >= 1,
    "NUM_UNIONS": _is_count,
    "NUM_FINDS": _is_count,
    "SEED": _is_count,
    "CHAIN": _is(bool),
    "UNIT": lambda x: x in ["ms", "s"],
}


def run_checks(checks: dict, cfg: CN):
    failed = False
    for check_name, check_fn in checks.items():
        if not check_fn(getattr(cfg, check_name)):
            failed = True
            log.error(f"Config check failed: {check_name}.")
    return not failed


def run_list_of_checks(checks: List[Tuple[Union[Dict, CN]]]):
    success = all([run_checks(check, cfg) for check, cfg in checks])
    if success:
        log.info("All config checks passed.")
    else:
        log.error("Config had errors. Aborting ...")
    return success


def check_unionfind_config(cfg: CN):
    """Check a disjoint set config for errors."""
    return run_list_of_checks([(system_checks, cfg.SYSTEM),
                               (global_checks, cfg),
                               (forest_checks, cfg.FOREST),
                               (benchmark_checks, cfg.BENCHMARK)])
