r"""
'    .__                       ________
'    |  | _____  ___________.__.\_____  \
'    |  | \__  \ \___   <   |  | /  / \  \
'    |  |__/ __ \_/    / \___  |/   \_/.  \
'    |____(____  /_____ \/ ____|\_____\ \_/
'              \/      \/\/            \__>
"""

# expose the adaptors
from .adaptors.merge import Merge, KMerge
from .adaptors.interleave import Interleave, InterleaveLongest

# expose the free functions. names that shadow builtins stay out of __all__
from .free import (
    enumerate,
    rev,
    zip,
    chain,
    fold,
    all,
    any,
    max,
    min,
    interleave,
    interleave_longest,
    merge,
    kmerge,
    join,
    sorted,
)

# expose the fluent classes and their factories
from .sequence import Seq, OrderedSeq
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    generate,
    seq,
    P,
)

# expose supporting types and configuration
from .types import PendingSlot, Descending, ordering_key
from .config import LazyqConfig, get_config, configure, reset_config

# define what `import *` does
__all__ = [
    "Merge",
    "KMerge",
    "Interleave",
    "InterleaveLongest",
    "rev",
    "chain",
    "fold",
    "interleave",
    "interleave_longest",
    "merge",
    "kmerge",
    "join",
    "Seq",
    "OrderedSeq",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "generate",
    "seq",
    "P",
    "PendingSlot",
    "Descending",
    "ordering_key",
    "LazyqConfig",
    "get_config",
    "configure",
    "reset_config",
]
