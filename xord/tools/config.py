import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from xord.orderings.explicit import UnrankedPosition

ENV_PREFIX = "XORD_"


@dataclass
class SortConfig:
    unknowns: Optional[UnrankedPosition] = field(
        default=None,
        metadata={"help": "Where values missing from the explicit order are placed. If `None`, such values are an error."})
    skip_blank: bool = field(
        default=True,
        metadata={"help": "Indicates if blank lines in the input files are ignored."})

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SortConfig":
        """
            Builds the configuration from `XORD_*` environment variables, falling back to the defaults above.
            Typically called after the optional `.env` file has been loaded.
        """
        environ = os.environ if environ is None else environ
        config = cls()

        unknowns = environ.get(f"{ENV_PREFIX}UNKNOWNS", "").strip().lower()
        if unknowns:
            config.unknowns = UnrankedPosition(unknowns)

        skip_blank = environ.get(f"{ENV_PREFIX}SKIP_BLANK", "").strip().lower()
        if skip_blank:
            config.skip_blank = skip_blank in ("1", "true", "yes", "on")

        return config
