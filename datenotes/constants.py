"""Shared constants for date notes."""

# Root note of every store
ROOT_NOTE_ID = "root"

# Calendar root
CALENDAR_ROOT_LABEL = "calendarRoot"
WORKSPACE_CALENDAR_ROOT_LABEL = "workspaceCalendarRoot"
CALENDAR_ROOT_TITLE = "Calendar"

# Container labels
YEAR_LABEL = "yearNote"
MONTH_LABEL = "monthNote"
WEEK_LABEL = "weekNote"
DATE_LABEL = "dateNote"
SORTED_LABEL = "sorted"
TEMPLATE_RELATION = "template"

# Per-root configuration labels
CALENDAR_TYPE_LABEL = "calendarType"
START_OF_THE_WEEK_LABEL = "startOfTheWeek"

DAYS = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]
MONTHS = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]
