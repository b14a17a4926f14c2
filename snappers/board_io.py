"""
Board Files - Load boards from JSON.

Two layouts are accepted:

    {"rows": [[0, 1, 0, 0, 0], ... 6 rows ...], "taps": 3}

    {"cells": [{"x": 1, "y": 1, "value": 1}, ...], "taps": 2}

"taps" is optional and gives the tap budget for the level.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .solver import BoardState

logger = logging.getLogger(__name__)


@dataclass
class Level:
    """A board together with its optional tap budget."""
    board: BoardState
    taps: Optional[int] = None


def parse_level(data: Dict[str, Any]) -> Level:
    """
    Build a Level from decoded JSON.

    Raises:
        ValueError: If the data is not a valid board description
    """
    if not isinstance(data, dict):
        raise ValueError("Board file must contain a JSON object")

    if "rows" in data:
        try:
            board = BoardState.from_rows(data["rows"])
        except TypeError as e:
            raise ValueError(f"Invalid 'rows': {e}") from e
    elif "cells" in data:
        if not isinstance(data["cells"], list):
            raise ValueError("'cells' must be a list")
        cells = {}
        for entry in data["cells"]:
            try:
                x, y = _integer(entry, "x"), _integer(entry, "y")
                cells[(x, y)] = entry["value"]
            except (KeyError, TypeError) as e:
                raise ValueError(f"Invalid cell entry {entry!r}: {e}") from e
        board = BoardState.from_cells(cells)
    else:
        raise ValueError("Board file needs either a 'rows' or a 'cells' key")

    taps = data.get("taps")
    if taps is not None:
        if not isinstance(taps, int) or isinstance(taps, bool):
            raise ValueError(f"'taps' must be an integer, got {taps!r}")

    return Level(board=board, taps=taps)


def _integer(entry: Dict[str, Any], key: str) -> int:
    value = entry[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Invalid cell entry {entry!r}: '{key}' must be an integer")
    return value


def load_level(path: Union[str, Path]) -> Level:
    """
    Read a board file.

    Raises:
        ValueError: If the file is missing, not JSON or not a valid board
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        raise ValueError(f"Cannot read board file {path}: {e}") from e

    level = parse_level(data)
    logger.debug(f"Loaded board from {path} ({level.board.count_cells()} critters)")
    return level
