from ._option import Option, OptionUnwrapError
from ._states import NONE, NoneOption, Some

__all__ = [
    "NONE",
    "NoneOption",
    "Option",
    "OptionUnwrapError",
    "Some",
]
