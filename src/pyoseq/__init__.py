"""Lazy, replayable sequences built from re-iterable sources."""

import logging

from ._combinators import (
    concat,
    exit,  # noqa: A004
    exit_after,
    filter,  # noqa: A004
    flat_map,
    map,  # noqa: A004
    reverse,
    slice,  # noqa: A004
    sort,
    sort_by,
)
from ._core import Config, get_config, set_config, setup_logger
from ._results import NONE, NoneOption, Option, OptionUnwrapError, Some
from ._seq import Seq
from ._source import empty, once, sequence
from ._terminals import (
    count,
    drain,
    every,
    find,
    first,
    fold,
    includes,
    last,
    reduce,
    some,
    to_list,
)
from ._types import Drained, Folded, Source

logging.getLogger("pyoseq").addHandler(logging.NullHandler())

__all__ = [
    "NONE",
    "Config",
    "Drained",
    "Folded",
    "NoneOption",
    "Option",
    "OptionUnwrapError",
    "Seq",
    "Some",
    "Source",
    "concat",
    "count",
    "drain",
    "empty",
    "every",
    "exit",
    "exit_after",
    "filter",
    "find",
    "first",
    "flat_map",
    "fold",
    "get_config",
    "includes",
    "last",
    "map",
    "once",
    "reduce",
    "reverse",
    "set_config",
    "setup_logger",
    "slice",
    "some",
    "sequence",
    "sort",
    "sort_by",
    "to_list",
]
