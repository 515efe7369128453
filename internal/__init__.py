from internal.logging import RunLogWriter, LogLevel, StructuredLogger, format_timestamp, get_logger

__all__ = [
    "RunLogWriter",
    "LogLevel",
    "StructuredLogger",
    "format_timestamp",
    "get_logger",
]
