import sys
from os.path import join
from typing import Iterable, List, Optional, TextIO

from loguru import logger


def read_values(stream: TextIO, skip_blank: bool = True) -> List[str]:
    """Reads one value per line from a text stream.
    Args:
        stream (TextIO): Stream to read from (e.g., an open file or stdin).
        skip_blank (bool, optional): Indicates if empty lines are dropped. Defaults to True.
    Returns:
        List[str]: Values with trailing newlines removed, in the order they were read.
    """
    values = [line.rstrip("\r\n") for line in stream]
    if skip_blank:
        values = [value for value in values if value.strip() != ""]
    return values


def write_values(stream: TextIO, values: Iterable[str]) -> None:
    for value in values:
        stream.write(f"{value}\n")


def configure_logger(log_dir: Optional[str] = None, verbose: bool = False):
    logger.remove()

    level = "DEBUG" if verbose else "INFO"
    log_format = "<green>[{time:DD.MM.YYYY at HH:mm:ss}]</green> <level>{level}</level> {message}"

    # results go to stdout, so diagnostics are kept on stderr
    logger.add(sys.stderr, colorize=True, format=log_format, level=level, backtrace=True, diagnose=True)
    if log_dir:
        logger.add(join(log_dir, "out.log"), format=log_format, level="DEBUG", backtrace=True, diagnose=True)

    return logger
