"""
Time Components and Parse Results

Extracted values are tagged by how they were obtained:

- CERTAIN: the value was written explicitly in the matched text ("15:30" makes
  hour and minute certain).
- IMPLIED: the value was defaulted or inferred (the day taken from the
  reference date, or AM inferred for "9:00").

Consumers that merge a time result into a date-only result must only override
implied fields, so the tag is kept alongside every value.
"""

from __future__ import annotations
import copy
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import IntEnum
from typing import Dict, Optional


class Meridiem(IntEnum):
    """Half-day designator."""
    AM = 0
    PM = 1


DATE_COMPONENTS = ('day', 'month', 'year')
TIME_COMPONENTS = ('hour', 'minute', 'second', 'millisecond', 'meridiem')


class TimeComponents:
    """
    Date/time fields tagged as certain or implied.

    Certain and implied values live in two disjoint dicts. ``assign`` always
    wins; ``imply`` never replaces a certain value.

    Examples:
        >>> components = TimeComponents(datetime(2023, 10, 15))
        >>> components.assign('hour', 15)
        >>> components.is_certain('hour'), components.is_certain('day')
        (True, False)
    """

    def __init__(self, reference: Optional[datetime] = None):
        self._known: Dict[str, int] = {}
        self._implied: Dict[str, int] = {}

        if reference is not None:
            self.imply('day', reference.day)
            self.imply('month', reference.month)
            self.imply('year', reference.year)

        self._imply_time_defaults()

    def _imply_time_defaults(self) -> None:
        self.imply('hour', 12)
        self.imply('minute', 0)
        self.imply('second', 0)
        self.imply('millisecond', 0)

    def get(self, component: str) -> Optional[int]:
        if component in self._known:
            return self._known[component]
        return self._implied.get(component)

    def is_certain(self, component: str) -> bool:
        return component in self._known

    def assign(self, component: str, value: int) -> None:
        self._known[component] = value
        self._implied.pop(component, None)

    def imply(self, component: str, value: int) -> None:
        if component in self._known:
            return
        self._implied[component] = value

    def delete(self, component: str) -> None:
        self._known.pop(component, None)
        self._implied.pop(component, None)

    def certain_components(self) -> Dict[str, int]:
        return dict(self._known)

    def implied_components(self) -> Dict[str, int]:
        return dict(self._implied)

    def copy(self) -> TimeComponents:
        return copy.deepcopy(self)

    def without_time(self) -> TimeComponents:
        """Copy with the time-of-day fields reset to their implied defaults."""
        components = self.copy()
        for component in TIME_COMPONENTS:
            components.delete(component)
        components._imply_time_defaults()
        return components

    def merge(self, other: TimeComponents) -> TimeComponents:
        """
        Return a new value where ``other``'s certain fields fill in this one.

        Certain fields of ``self`` are kept; only implied or missing fields are
        overridden. Implied fields of ``other`` are used where ``self`` has
        nothing at all.
        """
        merged = self.copy()
        for component, value in other._known.items():
            if not merged.is_certain(component):
                merged.assign(component, value)
        for component, value in other._implied.items():
            if merged.get(component) is None:
                merged.imply(component, value)
        return merged

    def date(self) -> datetime:
        """
        Build a datetime from the fields.

        Hour 24 and day overflow are carried into the next day rather than
        rejected.
        """
        year = self.get('year')
        month = self.get('month')
        day = self.get('day')
        if year is None or month is None or day is None:
            raise ValueError(f"Cannot build a date without day, month and year: {self!r}")

        return datetime(year, month, 1) + timedelta(
            days=day - 1,
            hours=self.get('hour') or 0,
            minutes=self.get('minute') or 0,
            seconds=self.get('second') or 0,
            milliseconds=self.get('millisecond') or 0,
        )

    @property
    def hour(self) -> Optional[int]:
        return self.get('hour')

    @property
    def minute(self) -> Optional[int]:
        return self.get('minute')

    @property
    def second(self) -> Optional[int]:
        return self.get('second')

    @property
    def millisecond(self) -> Optional[int]:
        return self.get('millisecond')

    @property
    def meridiem(self) -> Optional[Meridiem]:
        value = self.get('meridiem')
        return None if value is None else Meridiem(value)

    @property
    def day(self) -> Optional[int]:
        return self.get('day')

    @property
    def month(self) -> Optional[int]:
        return self.get('month')

    @property
    def year(self) -> Optional[int]:
        return self.get('year')

    def __eq__(self, other) -> bool:
        if not isinstance(other, TimeComponents):
            return NotImplemented
        return self._known == other._known and self._implied == other._implied

    def __repr__(self) -> str:
        parts = [f"{name}={value!r}" for name, value in self._known.items()]
        parts += [f"{name}~{value!r}" for name, value in self._implied.items()]
        return f"TimeComponents({', '.join(parts)})"


@dataclass(frozen=True)
class ParseResult:
    """
    One extracted time expression.

    ``index`` points past the leading boundary character, and ``text`` is the
    consumed substring, including the range continuation when ``end`` is set.
    ``reference`` is the date the implied day, month and year were taken
    from; it is the only way to tell which date was used when the caller
    left it to ``RELATIVE_BASE`` or the current time.
    """
    index: int
    text: str
    start: TimeComponents
    reference: datetime
    end: Optional[TimeComponents] = None

    @property
    def end_index(self) -> int:
        return self.index + len(self.text)

    def __repr__(self) -> str:
        parts = [f"index={self.index}", f"text={self.text!r}", f"start={self.start!r}"]
        if self.end is not None:
            parts.append(f"end={self.end!r}")
        return f"ParseResult({', '.join(parts)})"
