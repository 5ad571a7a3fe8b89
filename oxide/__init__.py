from .errors import UnwrapError, OptionError, ResultError, OptionKind, ResultKind
from .option import Option, Some, NONE, from_nullable
from .result import Result, Ok, Err
from .utils import (
    match,
    match_result,
    match_option,
    map_option,
    map_result,
    filter_map_option,
    filter_map_result,
)
from .attempt import attempt, as_result
from .logger import ConsoleLogger, get_logger, set_logger
