from ._core import Config, get_config
from ._factory import all, from_nullable, none, some
from ._lookups import find, find_map, first, get, get_in, last, nth
from ._option import NONE, UNWRAP_NONE_MESSAGE, NoneOption, Option, Some, UnwrapError

__all__ = [
    "NONE",
    "UNWRAP_NONE_MESSAGE",
    "Config",
    "NoneOption",
    "Option",
    "Some",
    "UnwrapError",
    "all",
    "find",
    "find_map",
    "first",
    "from_nullable",
    "get",
    "get_config",
    "get_in",
    "last",
    "none",
    "nth",
    "some",
]
