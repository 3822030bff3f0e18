# circlog/utils/errors.py
class ConfigParseError(ValueError):
    """
    A config record exists but cannot be turned into a RotationConfig.
    Never raised out of ConfigStore.load, only carried in ConfigReadResult.
    """


class LogWriteError(OSError):
    """
    Appending a line to the active bucket file failed.
    The message is lost unless the caller retries.
    """
