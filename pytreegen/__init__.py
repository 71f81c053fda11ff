from pytreegen.exceptions import (
    TreeConstructionError,
    CycleDetectedError,
    InvalidSizeError,
    InvalidVertexError,
    DisconnectedGraphError,
    GenerationLimitExceededError,
    InternalInconsistencyError,
)
from pytreegen.GraphClosure import GraphClosureTracker
from pytreegen.RandomSource import RandomSource, check_random_source
from pytreegen.GenericGraph import GenericGraph
from pytreegen.Tree import Tree
from pytreegen.generators import (
    DEFAULT_MAX_SIZE,
    check_large_parameter,
    bamboo,
    star,
    kary,
    binary,
    caterpillar,
    random_tree,
    random_prim,
    random_kruskal,
)

__all__ = [
    "TreeConstructionError",
    "CycleDetectedError",
    "InvalidSizeError",
    "InvalidVertexError",
    "DisconnectedGraphError",
    "GenerationLimitExceededError",
    "InternalInconsistencyError",
    "GraphClosureTracker",
    "RandomSource",
    "check_random_source",
    "GenericGraph",
    "Tree",
    "DEFAULT_MAX_SIZE",
    "check_large_parameter",
    "bamboo",
    "star",
    "kary",
    "binary",
    "caterpillar",
    "random_tree",
    "random_prim",
    "random_kruskal",
]
