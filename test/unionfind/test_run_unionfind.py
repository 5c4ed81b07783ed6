import os
import tempfile

from config.defaults import get_cfg_defaults
from unionfind.run_unionfind import run_unionfind, UNIONFIND_OUTPUT_NAME
from tools import log

SMALL_CONFIG = "examples/small.yaml"
SIXTEEN_CONFIG = "examples/sixteen.yaml"


def load_cfg(config, out_dir):
    cfg = get_cfg_defaults()
    cfg.merge_from_file(os.path.join(cfg.SYSTEM.CFG_DIR, config))
    cfg.OUTPUT_DIR = out_dir
    return cfg


def test_run_small():
    out_dir = tempfile.TemporaryDirectory()
    cfg = load_cfg(SMALL_CONFIG, out_dir.name)
    cfg.freeze()
    errors = log.num_errors

    res = run_unionfind(cfg)
    assert res == [None, 0, 0]
    assert log.num_errors == errors

    summary = os.path.join(out_dir.name, f"{UNIONFIND_OUTPUT_NAME}.txt")
    assert os.path.isfile(summary)
    with open(summary) as f:
        lines = f.read().splitlines()
    assert lines[:5] == ["find 0 -> 0", "find 1 -> 1", "find 2 -> 0", "union 1 2", "find 1 -> 0"]
    assert lines[5] == "parents: [None, 0, 0]"
    assert lines[6] == "0 1 2"
    out_dir.cleanup()


def test_run_sixteen_with_benchmark():
    out_dir = tempfile.TemporaryDirectory()
    cfg = load_cfg(SIXTEEN_CONFIG, out_dir.name)
    cfg.BENCHMARK.ENABLED = True
    cfg.BENCHMARK.SIZE = 200
    cfg.BENCHMARK.NUM_UNIONS = 100
    cfg.BENCHMARK.NUM_FINDS = 300
    cfg.BENCHMARK.CHAIN = True
    cfg.freeze()
    errors = log.num_errors

    res = run_unionfind(cfg)
    assert res is not None
    # "find 10" runs first and shortens the path of 7, so root 5 ends up under 14
    assert res.roots() == [14]
    assert log.num_errors == errors
    with open(os.path.join(out_dir.name, f"{UNIONFIND_OUTPUT_NAME}.txt")) as f:
        lines = f.read().splitlines()
    assert lines[:4] == ["find 10 -> 5", "union 7 4", "find 14 -> 14", "find 9 -> 14"]


def test_run_singletons_by_size():
    out_dir = tempfile.TemporaryDirectory()
    cfg = get_cfg_defaults()
    cfg.OUTPUT_DIR = os.path.join(out_dir.name, "new_dir")
    cfg.FOREST.SIZE = 4
    cfg.FOREST.OPERATIONS = ["union 0 1", "union 2 3"]
    res = run_unionfind(cfg)
    assert res.sets() == [[0, 1], [2, 3]]
    assert os.path.isdir(cfg.OUTPUT_DIR)


def test_run_errors():
    out_dir = tempfile.TemporaryDirectory()
    cfg = get_cfg_defaults()
    cfg.OUTPUT_DIR = out_dir.name
    cfg.FOREST.PARENTS = [None, 0]
    cfg.FOREST.OPERATIONS = ["find 2"]
    errors = log.num_errors
    assert run_unionfind(cfg) is None
    assert log.num_errors == errors + 1

    # a cycle is only found when an operation walks it
    cfg.FOREST.PARENTS = [1, 0, None]
    cfg.FOREST.OPERATIONS = ["find 2", "find 0"]
    assert run_unionfind(cfg) is None
    assert log.num_errors == errors + 2

    cfg.FOREST.PARENTS = [None, 1]
    cfg.FOREST.OPERATIONS = []
    assert run_unionfind(cfg) is None
    assert log.num_errors == errors + 3


def test_run_cycle_untouched_by_operations():
    out_dir = tempfile.TemporaryDirectory()
    cfg = get_cfg_defaults()
    cfg.OUTPUT_DIR = out_dir.name
    cfg.FOREST.PARENTS = [1, 0, None]
    cfg.FOREST.OPERATIONS = ["find 2"]
    errors = log.num_errors
    # the operations succeed, grouping the elements runs into the 0 <-> 1 cycle
    assert run_unionfind(cfg) is None
    assert log.num_errors == errors + 1
    assert not os.path.exists(os.path.join(out_dir.name, f"{UNIONFIND_OUTPUT_NAME}.txt"))
    out_dir.cleanup()
