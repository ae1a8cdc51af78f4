from __future__ import annotations
import os


_DEFAULT_INT_BITS = 32
_DEFAULT_PROMPT = "scm> "
_DEFAULT_LOG_LEVEL = "WARNING"


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def str_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    return default if raw is None else raw


def get_int_bits() -> int:
    bits = int_from_env('SKIM_INT_BITS', _DEFAULT_INT_BITS)
    return bits if bits > 1 else _DEFAULT_INT_BITS


def integer_bounds() -> tuple[int, int]:
    """Smallest and largest value of the signed platform integer."""
    bits = get_int_bits()
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def get_prompt() -> str:
    return str_from_env('SKIM_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> str:
    return str_from_env('SKIM_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper() or _DEFAULT_LOG_LEVEL
