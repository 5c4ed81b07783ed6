from yacs.config import CfgNode as CN
from pathlib import Path

C = CN()
C.SYSTEM = CN()

# path to the config directory
C.SYSTEM.CFG_DIR = str(Path(__file__).parent)

# path to the repo's root directory
C.SYSTEM.ROOT_DIR = str(Path(__file__).parent.parent)

# directory for the log and the result summary, to be overridden
C.OUTPUT_DIR = None

########################################
# Disjoint set forest config
########################################
C.FOREST = CN()

# number of elements, used only if PARENTS is empty (every element is its own set then)
C.FOREST.SIZE = 0

# initial parent of each element, null for roots
# e.g [null, null, 0] -> elements 0 and 2 in one set, 1 alone
C.FOREST.PARENTS = []

# which operations to use: "naive" (find, copying union) or "compressed"
# (path compression and union by depth, in place)
C.FOREST.MODE = "compressed"

# operations to run in order, each one either "find i" or "union i j"
C.FOREST.OPERATIONS = []

########################################
# Naive vs compressed benchmark config
########################################
C.BENCHMARK = CN()

# run the benchmark after the operations
C.BENCHMARK.ENABLED = False

# number of elements in the benchmarked forest
C.BENCHMARK.SIZE = 1000

# number of random unions and finds
C.BENCHMARK.NUM_UNIONS = 500
C.BENCHMARK.NUM_FINDS = 1000

# seed of the random operation generator
C.BENCHMARK.SEED = 0

# start from a single linear chain instead of singletons (worst case for naive find)
C.BENCHMARK.CHAIN = False

# time unit of the printed table ("ms" or "s")
C.BENCHMARK.UNIT = "ms"


def get_cfg_defaults():
    """Get a yacs config object with default values."""
    return C.clone()
