import sys
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from loguru import logger
from typing_extensions import Annotated

from xord.orderings.explicit import UnrankedPosition, explicit
from xord.orderings.ordering import Ordering
from xord.tools.config import SortConfig
from xord.tools.errors import DuplicateValueError, IncomparableValueError
from xord.tools.utils import configure_logger, read_values, write_values

app = typer.Typer()


def _load_config(env_file: Optional[Path], unknowns: Optional[UnrankedPosition]) -> SortConfig:
    if env_file is not None:
        load_dotenv(dotenv_path=env_file)

    try:
        config = SortConfig.from_env()
    except ValueError as error:
        logger.error(f"Invalid configuration: {error}")
        raise typer.Exit(code=1)

    # explicit options take precedence over the environment
    if unknowns is not None:
        config.unknowns = unknowns
    return config


def _load_ordering(order_file: Path, config: SortConfig) -> Ordering:
    with open(order_file, "r", encoding="utf-8") as f:
        values = read_values(f, skip_blank=config.skip_blank)

    try:
        ordering = explicit(values)
    except DuplicateValueError as error:
        logger.error(f"Invalid order file '{order_file}': {error}")
        raise typer.Exit(code=1)
    logger.debug(f"Loaded {ordering!r} from '{order_file}'")

    if config.unknowns == UnrankedPosition.first:
        return ordering.unknowns_first()
    elif config.unknowns == UnrankedPosition.last:
        return ordering.unknowns_last()
    return ordering


@app.command(help="Sort values by their position in an explicit order.")
def sort(
    order_file: Annotated[Path, typer.Option(help="Path to a file listing the explicit order, one value per line, least first.", dir_okay=False, file_okay=True, exists=True)],
    values_file: Annotated[Optional[Path], typer.Option(help="Path to a file with the values to sort, one per line. Reads from stdin if omitted.", dir_okay=False, file_okay=True, exists=True)] = None,
    unknowns: Annotated[Optional[UnrankedPosition], typer.Option(help="Place values missing from the order first or last. If omitted, such values are an error.", case_sensitive=False)] = None,
    reverse: Annotated[bool, typer.Option(help="Output values from greatest to least.")] = False,
    env_file: Annotated[Optional[Path], typer.Option(help="Path to the .env file defining XORD_* environment variables.", dir_okay=False, file_okay=True)] = None,
    verbose: Annotated[bool, typer.Option(help="Enable debug logging.")] = False,
):
    configure_logger(verbose=verbose)
    config = _load_config(env_file, unknowns)
    ordering = _load_ordering(order_file, config)

    if values_file is not None:
        with open(values_file, "r", encoding="utf-8") as f:
            values = read_values(f, skip_blank=config.skip_blank)
    else:
        values = read_values(sys.stdin, skip_blank=config.skip_blank)

    try:
        result: List[str] = ordering.sort(values)
    except IncomparableValueError as error:
        logger.error(f"Value {error.value!r} is not listed in '{order_file}' (use --unknowns first|last to allow it)")
        raise typer.Exit(code=1)

    if reverse:
        result = result[::-1]

    logger.debug(f"Sorted {len(result)} values")
    write_values(sys.stdout, result)


@app.command(help="Compare two values by their position in an explicit order. Prints -1, 0 or 1.")
def compare(
    left: Annotated[str, typer.Argument(help="Left value.")],
    right: Annotated[str, typer.Argument(help="Right value.")],
    order_file: Annotated[Path, typer.Option(help="Path to a file listing the explicit order, one value per line, least first.", dir_okay=False, file_okay=True, exists=True)],
    unknowns: Annotated[Optional[UnrankedPosition], typer.Option(help="Place values missing from the order first or last. If omitted, such values are an error.", case_sensitive=False)] = None,
    env_file: Annotated[Optional[Path], typer.Option(help="Path to the .env file defining XORD_* environment variables.", dir_okay=False, file_okay=True)] = None,
    verbose: Annotated[bool, typer.Option(help="Enable debug logging.")] = False,
):
    configure_logger(verbose=verbose)
    config = _load_config(env_file, unknowns)
    ordering = _load_ordering(order_file, config)

    try:
        result = ordering.compare(left, right)
    except IncomparableValueError as error:
        logger.error(f"Value {error.value!r} is not listed in '{order_file}' (use --unknowns first|last to allow it)")
        raise typer.Exit(code=1)

    typer.echo((result > 0) - (result < 0))


if __name__ == "__main__":
    app()
