"""Multi-Indexed Tree - a keyed tree with primary and secondary indices."""

__version__ = "0.1.0"

# Environment variable names for config overrides
ENV_DUPLICATE_KEYS = "MITREE_DUPLICATE_KEYS"
ENV_MAX_RENDER_DEPTH = "MITREE_MAX_RENDER_DEPTH"

from .config import TreeConfig, load_config, save_config  # noqa: E402
from .errors import (  # noqa: E402
    DuplicateKeyError,
    InvalidMoveError,
    KeyNotFoundError,
    ParentNotFoundError,
    RootRemovalError,
    TreeError,
)
from .iterators import (  # noqa: E402
    BreadthFirstIterator,
    DepthFirstIterator,
    ShortestPathIterator,
)
from .node import TreeNode  # noqa: E402
from .paths import shortest_paths  # noqa: E402
from .tree import MultiIndexedTree  # noqa: E402

__all__ = [
    "BreadthFirstIterator",
    "DepthFirstIterator",
    "DuplicateKeyError",
    "InvalidMoveError",
    "KeyNotFoundError",
    "MultiIndexedTree",
    "ParentNotFoundError",
    "RootRemovalError",
    "ShortestPathIterator",
    "TreeConfig",
    "TreeError",
    "TreeNode",
    "load_config",
    "save_config",
    "shortest_paths",
]
