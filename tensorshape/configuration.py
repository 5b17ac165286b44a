import logging
import os
import tomllib
from dataclasses import dataclass

from .shape import Rank


@dataclass
class ShapeConfiguration:
    """Settings for the command-line front end."""

    default_rank: int = 4
    log_level: str = "INFO"

    def __post_init__(self):
        """Normalise ``default_rank`` to a ``Rank`` and ``log_level`` to upper case.

        Raises ValueError if the rank is outside 1..6 or the level is not a
        known logging level name.
        """
        self.default_rank = Rank(self.default_rank)
        level = str(self.log_level).upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {self.log_level!r}")
        self.log_level = level

    @classmethod
    def load(cls, config_path: str) -> "ShapeConfiguration":
        """
        Load configuration from a TOML file.

        Parameters
        ----------
        config_path : str
            Filesystem path to a TOML file containing a "tensorshape" table.

        Returns
        -------
        ShapeConfiguration
            Instance populated from the "tensorshape" table; missing keys use
            the dataclass defaults.

        Raises
        ------
        FileNotFoundError
            If no file exists at `config_path`.
        tomllib.TOMLDecodeError
            If the file is not valid TOML.
        ValueError
            If `default_rank` or `log_level` is invalid.
        TypeError
            If the table contains an unknown key.
        """
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Configuration file not found at {config_path}")

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        shape_data = data.get("tensorshape", {})
        return cls(**shape_data)
