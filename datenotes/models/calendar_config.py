"""Calendar configuration model derived from a calendar root note."""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class CalendarType(str, Enum):
    """Shape of the container hierarchy below a calendar root."""

    MONTHLY = "monthly"
    WEEKLY = "weekly"


class StartOfWeek(str, Enum):
    """Week numbering convention."""

    MONDAY = "monday"
    SUNDAY = "sunday"


class Granularity(str, Enum):
    """Levels of the calendar hierarchy."""

    ROOT = "root"
    YEAR = "year"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"

    @property
    def attribute_prefix(self) -> str:
        """Prefix of the label/pattern/template names for this level."""
        return "date" if self is Granularity.DAY else self.value

    @property
    def label_name(self) -> str:
        """Label marking a container of this level (e.g. yearNote)."""
        return f"{self.attribute_prefix}Note"

    @property
    def pattern_label(self) -> str:
        return f"{self.attribute_prefix}Pattern"

    @property
    def template_relation(self) -> str:
        return f"{self.attribute_prefix}Template"


# Fixed widths of canonical label values (YYYY, YYYY-MM, YYYY-MM-DD)
CANONICAL_LENGTHS = {
    Granularity.YEAR: 4,
    Granularity.MONTH: 7,
    Granularity.DAY: 10,
}

DEFAULT_PATTERNS = {
    Granularity.YEAR: "{year}",
    Granularity.MONTH: "{monthNumberPadded} - {month}",
    Granularity.WEEK: "WW{weekNumber}",
    Granularity.DAY: "{dayInMonthPadded} - {weekDay}",
}

CONTAINER_GRANULARITIES = (
    Granularity.YEAR,
    Granularity.MONTH,
    Granularity.WEEK,
    Granularity.DAY,
)

HIERARCHY_SHAPES = {
    CalendarType.MONTHLY: (Granularity.YEAR, Granularity.MONTH, Granularity.DAY),
    CalendarType.WEEKLY: (Granularity.YEAR, Granularity.WEEK, Granularity.DAY),
}


class CalendarConfig(BaseModel):
    """Read-only view of a calendar root's configuration labels and relations.

    Rebuilt from the root note on every resolution so that edits to the
    root take effect on the next call.
    """

    calendar_type: CalendarType = CalendarType.MONTHLY
    # Raw #startOfTheWeek value, validated where a week number is computed
    start_of_the_week: str = StartOfWeek.MONDAY.value
    patterns: dict[Granularity, str] = Field(
        default_factory=lambda: dict(DEFAULT_PATTERNS)
    )
    templates: dict[Granularity, str] = Field(default_factory=dict)

    class Config:
        """Pydantic config."""

        frozen = True

    @field_validator("start_of_the_week", mode="before")
    @classmethod
    def convention_value(cls, v):
        """Store StartOfWeek members as their plain value."""
        if isinstance(v, StartOfWeek):
            return v.value
        return v

    @property
    def hierarchy(self) -> tuple[Granularity, ...]:
        return HIERARCHY_SHAPES[self.calendar_type]

    def pattern_for(self, granularity: Granularity) -> str:
        return self.patterns.get(granularity) or DEFAULT_PATTERNS[granularity]

    def template_for(self, granularity: Granularity) -> str | None:
        """Target note id of the <level>Template relation, if configured."""
        return self.templates.get(granularity)

    def parent_of(self, granularity: Granularity) -> Granularity | None:
        """Granularity of the container directly above the given one.

        Returns ROOT for the first level of the hierarchy and None when the
        level does not exist for this calendar type (e.g. MONTH in a weekly
        calendar).
        """
        shape = self.hierarchy
        if granularity not in shape:
            return None
        index = shape.index(granularity)
        if index == 0:
            return Granularity.ROOT
        return shape[index - 1]


class WeekNoteOptions(BaseModel):
    """Per-call overrides for week note resolution."""

    start_of_the_week: str | None = None
