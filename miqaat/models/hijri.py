"""Tabular (Misri) Hijri date with Gregorian conversion.

The calendar follows a fixed 30-year cycle of 354/355-day years. Months
alternate 30 and 29 days; the twelfth month gains a day in kabisa years.
Conversion works on proleptic Gregorian ordinals so it is exact integer
arithmetic throughout.
"""

from bisect import bisect_right
from dataclasses import dataclass
from datetime import date

from miqaat.exceptions import ValidationError

# Cycle positions (year % 30) that are kabisa (355 days)
KABISA_YEAR_REMAINDERS = (2, 5, 8, 10, 13, 16, 19, 21, 24, 27, 29)

# Cumulative days at the end of months 0..10
DAYS_IN_YEAR = (30, 59, 89, 118, 148, 177, 207, 236, 266, 295, 325)

# Cumulative days at the end of cycle years 0..29
DAYS_IN_30_YEARS = (
    354, 708, 1063, 1417, 1771, 2126, 2480, 2834, 3189, 3543,
    3898, 4252, 4606, 4961, 5315, 5669, 6024, 6378, 6732, 7087,
    7441, 7796, 8150, 8504, 8859, 9213, 9567, 9922, 10276, 10631,
)
DAYS_IN_CYCLE = DAYS_IN_30_YEARS[-1]

# Gregorian ordinal of the day before 1 Moharram of year 0
# (Julian Day 1948083.5 minus the ordinal/JD offset 1721424.5)
EPOCH_ORDINAL = 226659

LONG_NAMES = (
    "Moharram al-Haraam",
    "Safar al-Muzaffar",
    "Rabi al-Awwal",
    "Rabi al-Aakhar",
    "Jumada al-Ula",
    "Jumada al-Ukhra",
    "Rajab al-Asab",
    "Shabaan al-Karim",
    "Ramadaan al-Moazzam",
    "Shawwal al-Mukarram",
    "Zilqadah al-Haraam",
    "Zilhaj al-Haraam",
)

SHORT_NAMES = (
    "Moharram",
    "Safar",
    "Rabi I",
    "Rabi II",
    "Jumada I",
    "Jumada II",
    "Rajab",
    "Shabaan",
    "Ramadaan",
    "Shawwal",
    "Zilqadah",
    "Zilhaj",
)

ARABIC_DIGITS = str.maketrans("0123456789", "٠١٢٣٤٥٦٧٨٩")


def is_kabisa(year: int) -> bool:
    """True if the Hijri year has 355 days."""
    return year % 30 in KABISA_YEAR_REMAINDERS


def days_in_month(year: int, month: int) -> int:
    """Number of days in a zero-based Hijri month."""
    if month % 2 == 0 or (month == 11 and is_kabisa(year)):
        return 30
    return 29


def days_in_year(year: int) -> int:
    """Number of days in a Hijri year."""
    return 355 if is_kabisa(year) else 354


@dataclass(frozen=True, order=True)
class HijriDate:
    """A day of the Hijri calendar.

    ``month`` is zero-based (0 = Moharram). Instances are immutable and
    ordered chronologically.
    """

    year: int
    month: int
    day: int

    def __post_init__(self):
        if not 0 <= self.month <= 11:
            raise ValidationError(f"Invalid Hijri month: {self.month} (expected 0-11)")
        length = days_in_month(self.year, self.month)
        if not 1 <= self.day <= length:
            raise ValidationError(
                f"Invalid day {self.day} for {SHORT_NAMES[self.month]} {self.year} "
                f"(expected 1-{length})"
            )

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "HijriDate":
        """Create from a proleptic Gregorian ordinal."""
        offset = ordinal - EPOCH_ORDINAL - 1
        cycles, offset = divmod(offset, DAYS_IN_CYCLE)

        year_in_cycle = bisect_right(DAYS_IN_30_YEARS, offset)
        if year_in_cycle > 0:
            offset -= DAYS_IN_30_YEARS[year_in_cycle - 1]

        month = bisect_right(DAYS_IN_YEAR, offset)
        if month > 0:
            offset -= DAYS_IN_YEAR[month - 1]

        return cls(cycles * 30 + year_in_cycle, month, offset + 1)

    @classmethod
    def from_gregorian(cls, value: date) -> "HijriDate":
        """Convert a Gregorian date."""
        return cls.from_ordinal(value.toordinal())

    @classmethod
    def today(cls, ref_date: date | None = None) -> "HijriDate":
        """Today's Hijri date (or that of ``ref_date``)."""
        return cls.from_gregorian(ref_date or date.today())

    @classmethod
    def from_key(cls, key: str) -> "HijriDate":
        """Parse a ``day-month-year`` selection key."""
        parts = key.split("-")
        if len(parts) != 3:
            raise ValidationError(f"Invalid date key: {key!r}")
        try:
            day, month, year = (int(part) for part in parts)
        except ValueError:
            raise ValidationError(f"Invalid date key: {key!r}")
        return cls(year, month, day)

    def toordinal(self) -> int:
        """Proleptic Gregorian ordinal of this day."""
        cycles, year_in_cycle = divmod(self.year, 30)
        ordinal = EPOCH_ORDINAL + cycles * DAYS_IN_CYCLE + self.day_of_year()
        if year_in_cycle:
            ordinal += DAYS_IN_30_YEARS[year_in_cycle - 1]
        return ordinal

    def to_gregorian(self) -> date:
        """Convert to a Gregorian date.

        Raises:
            ValidationError: If the date falls outside Gregorian years 1-9999.
        """
        try:
            return date.fromordinal(self.toordinal())
        except (ValueError, OverflowError):
            raise ValidationError(f"{self.key} has no Gregorian date in years 1-9999")

    def day_of_year(self) -> int:
        """One-based day of the Hijri year."""
        if self.month == 0:
            return self.day
        return DAYS_IN_YEAR[self.month - 1] + self.day

    def days_in_month(self) -> int:
        return days_in_month(self.year, self.month)

    def is_kabisa(self) -> bool:
        return is_kabisa(self.year)

    def add_days(self, days: int) -> "HijriDate":
        """Date ``days`` later (or earlier when negative)."""
        return HijriDate.from_ordinal(self.toordinal() + days)

    def is_today(self, ref_date: date | None = None) -> bool:
        return self == HijriDate.today(ref_date)

    @property
    def month_name(self) -> str:
        return LONG_NAMES[self.month]

    @property
    def short_month_name(self) -> str:
        return SHORT_NAMES[self.month]

    @property
    def key(self) -> str:
        """Selection key ``day-month-year`` (zero-based month)."""
        return f"{self.day}-{self.month}-{self.year}"

    def to_arabic(self) -> str:
        """Day number in Arabic-Indic digits."""
        return str(self.day).translate(ARABIC_DIGITS)

    def formatted(self) -> str:
        """Short display form, e.g. ``5 Safar 1446``."""
        return f"{self.day} {self.short_month_name} {self.year}"

    def __str__(self) -> str:
        return self.formatted()
