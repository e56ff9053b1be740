"""Tabulated shock and reaction temperature predictions.

Tables are indexed by particle (piston) velocity in their first column. The
remaining columns hold one prediction per material density class. Lookups
interpolate linearly between the two rows that bracket a velocity.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from typing import Iterable, Optional, Sequence, Union

PathType = Union[str, "PathLike[str]"]


def read_csv(path) -> list[list[float]]:
    """Read a comma separated file of numbers into a list of rows.

    An empty line gives an empty row and a trailing comma is ignored.
    Raises ``OSError`` if the file cannot be opened and ``ValueError`` on a
    field that is not a number.
    """
    rows: list[list[float]] = []
    with open(path, encoding="utf-8") as handle:
        for raw_line in handle:
            line = raw_line.rstrip("\r\n")
            if not line:
                rows.append([])
                continue
            fields = line.split(",")
            if fields[-1] == "":
                fields.pop()
            row = []
            for value in fields:
                try:
                    row.append(float(value))
                except ValueError:
                    raise ValueError(f"Invalid value in CSV file: {value}") from None
            rows.append(row)
    return rows


def interpolate(lower, upper, t) -> list[float]:
    """Blend two equally long sequences: ``(1 - t) * lower + t * upper``."""
    return [(1.0 - t) * a + t * b for a, b in zip(lower, upper, strict=True)]


def _split_rows(rows: Iterable[Sequence[float]]) -> tuple[tuple[float, ...], tuple[tuple[float, ...], ...]]:
    keys = []
    values = []
    for row in rows:
        if len(row) < 2:
            raise ValueError("need bigger CSV")
        keys.append(float(row[0]))
        values.append(tuple(float(v) for v in row[1:]))
    return tuple(keys), tuple(values)


def _pick(values: Sequence[float], index: int) -> float:
    index = int(index)
    if not 0 <= index < len(values):
        raise IndexError(f"column {index} is outside the table")
    return values[index]


@dataclass(frozen=True)
class ShockTable:
    """Shock temperature, reaction temperature and reaction time tables.

    All three tables share the velocity column of the shock table.
    """

    up_values: tuple[float, ...]
    shock_temperatures: tuple[tuple[float, ...], ...]
    react_temperatures: tuple[tuple[float, ...], ...]
    reaction_times: tuple[tuple[float, ...], ...] = field(default=())

    @classmethod
    def from_rows(cls, shock_rows, react_rows, time_rows=None) -> "ShockTable":
        """Build the tables from rows whose first entry is the velocity."""
        up_values, shock = _split_rows(shock_rows)
        _, react = _split_rows(react_rows)
        times: tuple[tuple[float, ...], ...] = ()
        if time_rows is not None:
            _, times = _split_rows(time_rows)
        return cls(
            up_values=up_values,
            shock_temperatures=shock,
            react_temperatures=react,
            reaction_times=times,
        )

    @classmethod
    def from_files(cls, shock_path, react_path, times_path: Optional[PathType] = None) -> "ShockTable":
        """Read the tables from CSV files."""
        time_rows = read_csv(times_path) if times_path is not None else None
        return cls.from_rows(read_csv(shock_path), read_csv(react_path), time_rows)

    def bracket(self, up) -> tuple[int, float]:
        """Return the lower row of the interval holding ``up`` and the blend ratio.

        The interval is the first one whose upper velocity exceeds ``up``;
        below the first velocity the first interval is extrapolated.
        """
        for i in range(1, len(self.up_values)):
            if self.up_values[i] > up:
                lower = self.up_values[i - 1]
                upper = self.up_values[i]
                return i - 1, (up - lower) / (upper - lower)
        raise ValueError(f"velocity {up} is outside the table")

    def temperatures(self, up, index) -> tuple[float, float]:
        """Interpolated shock and reaction temperatures for column ``index``."""
        interval, t = self.bracket(up)
        shock = interpolate(self.shock_temperatures[interval], self.shock_temperatures[interval + 1], t)
        react = interpolate(self.react_temperatures[interval], self.react_temperatures[interval + 1], t)
        return _pick(shock, index), _pick(react, index)

    def reaction_time(self, up, index) -> float:
        """Interpolated reaction time for column ``index``."""
        if not self.reaction_times:
            raise ValueError("no reaction time table")
        interval, t = self.bracket(up)
        times = interpolate(self.reaction_times[interval], self.reaction_times[interval + 1], t)
        return _pick(times, index)