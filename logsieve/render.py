from .types import Error, Info, KnownLog, LogLevel, LogMessage, MalformedLog, UnknownLog, Warning


def show_level(level: LogLevel) -> str:
    if isinstance(level, Error):
        return f"Error {level.severity}"
    if isinstance(level, Info):
        return "Info"
    if isinstance(level, Warning):
        return "Warning"
    raise TypeError(f"not a log level: {level!r}")


def show_log_message(log: LogMessage) -> str:
    """
    Render a LogMessage for display.

      KnownLog(Info(), 147, "mice in the air")  -> "Info (147) mice in the air"
      KnownLog(Error(2), 147, "weird")          -> "Error 2 (147) weird"
      UnknownLog("message")                     -> "Unknown log: message"
      MalformedLog()                            -> "Malformed Log"
    """
    if isinstance(log, KnownLog):
        return f"{show_level(log.level)} ({log.timestamp}) {log.message}"
    if isinstance(log, UnknownLog):
        return f"Unknown log: {log.message}"
    if isinstance(log, MalformedLog):
        return "Malformed Log"
    raise TypeError(f"not a log message: {log!r}")
