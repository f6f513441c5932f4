from inspect import getfile
from os.path import basename
import re
from time import time
from typing import Any, Callable

from cinema_booking.platform.logging.loguru_io_config import (
    MASK,
    SENSITIVE_KEYWORDS,
    TRUNCATE_LIMIT,
    call_depth_var,
    chain_start_time_var,
)


# Matches `card_number='4111...'` / `cvv="123"` inside reprs of attrs and pydantic objects
_SENSITIVE_PATTERN = re.compile(
    rf"\b({'|'.join(sorted(SENSITIVE_KEYWORDS))})(=|': |\": )(['\"])(.*?)\3"
)


def get_chain_start_time() -> float:
    if not (start_time := chain_start_time_var.get()):
        start_time = time()
        chain_start_time_var.set(start_time)
    return start_time


def build_call_target_func_path(func: Callable[..., Any]) -> str:
    target = getattr(func, '__func__', func)
    lineno = getattr(getattr(target, '__code__', None), 'co_firstlineno', 0)
    return f'{basename(getfile(target))}::{func.__qualname__}:{lineno}'


def reset_call_depth() -> None:
    layer = call_depth_var.get() - 1
    call_depth_var.set(layer)
    if not layer:
        chain_start_time_var.set(0)


def mask_sensitive(data: Any) -> Any:
    try:
        data_str = str(data)
        masked = _SENSITIVE_PATTERN.sub(rf'\1\2\3{MASK}\3', data_str)
        return data if masked == data_str else masked
    except Exception:
        return data


def should_mask_keyword(keyword: Any, value: Any) -> Any:
    return MASK if keyword in SENSITIVE_KEYWORDS else value


def truncate_content(data: Any) -> Any:
    data_str = str(data)
    if len(data_str) <= TRUNCATE_LIMIT:
        return data
    return f'{data_str[:TRUNCATE_LIMIT]}...(+{len(data_str) - TRUNCATE_LIMIT} chars)'
