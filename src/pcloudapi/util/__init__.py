from .time import (
    TIME_FORMAT,
    ZERO_TIME,
    decode_time,
    encode_time,
    format_time,
    is_zero,
    normalize_dt,
    now_utc,
    parse_time,
)

__all__ = [
    "TIME_FORMAT",
    "ZERO_TIME",
    "now_utc",
    "normalize_dt",
    "is_zero",
    "format_time",
    "parse_time",
    "encode_time",
    "decode_time",
]
