import os
import sys

from yacs.config import CfgNode as CN

from config.defaults import get_cfg_defaults
from config.verify_config import check_unionfind_config, global_checks
from config.config_tools import expand_relative_paths
from tools.data_structures import DisjointSet, RangeError, CycleError
from tools import log
from tools.util import parse_args
from unionfind.operations import apply_operations
from unionfind.benchmark import chain_forest, random_operations, run_benchmark

UNIONFIND_OUTPUT_NAME = "unionfind_result"

########################################
# Run disjoint set operations
########################################


def build_forest(cfg: CN) -> DisjointSet:
    """Create the initial forest described by the FOREST config."""
    if len(cfg.FOREST.PARENTS) > 0:
        return DisjointSet(cfg.FOREST.PARENTS)
    return DisjointSet.singletons(cfg.FOREST.SIZE)


def save_summary(path: str, forest: DisjointSet, sets, operations, results):
    with open(path, "w") as f:
        for op, res in zip(operations, results):
            f.write(op if res is None else f"{op} -> {res}")
            f.write("\n")
        f.write(f"parents: {forest.to_list()}\n")
        for members in sets:
            f.write(" ".join(map(str, members)))
            f.write("\n")


def run_unionfind_benchmark(cfg: CN):
    c = cfg.BENCHMARK
    if c.CHAIN:
        forest = chain_forest(c.SIZE)
    else:
        forest = DisjointSet.singletons(c.SIZE)
    unions, finds = random_operations(c.SIZE, c.NUM_UNIONS, c.NUM_FINDS, c.SEED)
    log.info("Benchmarking %s unions and %s finds on %s elements ...",
             c.NUM_UNIONS, c.NUM_FINDS, c.SIZE)
    bench, agree = run_benchmark(forest, unions, finds)
    log.info("Benchmark results:\n" + bench.get_benchmark(unit=c.UNIT) + "\n")
    naive_total = bench.total("union") + bench.total("find")
    compressed_total = bench.total("compressed_union") + bench.total("compressed_find")
    if compressed_total > 0:
        log.info("Compressed operations were %.2fx faster in total.", naive_total / compressed_total)
    return agree


def run_unionfind(cfg: CN):
    """Run the operations of a config on its forest, return the resulting forest."""
    if not check_unionfind_config(cfg):
        return None

    if not os.path.exists(cfg.OUTPUT_DIR):
        os.makedirs(cfg.OUTPUT_DIR)

    try:
        forest = build_forest(cfg)
    except (ValueError, RangeError) as e:
        log.error("Invalid initial forest: %s", e)
        return None
    log.info("Forest loaded with %s elements in %s sets.", len(forest), forest.n_sets)

    try:
        forest, results = apply_operations(forest, cfg.FOREST.OPERATIONS, cfg.FOREST.MODE)
        # grouping walks every index, so it also hits cycles no operation reached
        sets = forest.sets()
    except (RangeError, CycleError) as e:
        log.error("Operation failed: %s", e)
        return None

    log.info("Ran %s operations in %s mode, %s sets remain:",
             len(results), cfg.FOREST.MODE, forest.n_sets)
    log.inc_depth()
    for members in sets:
        log.info("%s", members)
    log.dec_depth()

    summary_path = os.path.join(cfg.OUTPUT_DIR, f"{UNIONFIND_OUTPUT_NAME}.txt")
    save_summary(summary_path, forest, sets, cfg.FOREST.OPERATIONS, results)
    log.info("Summary saved to: %s", summary_path)

    if cfg.BENCHMARK.ENABLED and not run_unionfind_benchmark(cfg):
        return None
    return forest


if __name__ == "__main__":
    args = parse_args("Run disjoint set operations described by a config.")
    cfg = get_cfg_defaults()
    if args.config:
        cfg.merge_from_file(os.path.join(cfg.SYSTEM.CFG_DIR, args.config))
    cfg = expand_relative_paths(cfg)
    cfg.freeze()

    # initialize output directory and logging
    if not global_checks["OUTPUT_DIR"](cfg.OUTPUT_DIR):
        print("Invalid param value in: OUTPUT_DIR. Provide an absolute path to a directory, whose parent exists.")
        sys.exit(2)
    if not os.path.exists(cfg.OUTPUT_DIR):
        os.makedirs(cfg.OUTPUT_DIR)

    log_path = os.path.join(cfg.OUTPUT_DIR, args.log_filename)
    log.log_init(log_path, args.log_level, not args.no_log_stdout)

    res = run_unionfind(cfg)
    sys.exit(0 if res is not None else 1)
