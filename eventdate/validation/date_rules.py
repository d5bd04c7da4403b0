"""
Rules and constants for event date handling.

These limits decide what counts as a day, a year or a split year, and how far
the fuzzy day bounds are widened for imprecise dates.
"""

# Numeric ranges
MIN_DAY = 1
MAX_DAY = 31
MIN_YEAR = 1
MAX_YEAR = 5000

# Double dating (civil year starting 25 March). England used it from the 12th
# century to 1752; some countries started the year in March earlier.
MIN_SPLIT_YEAR = 1000
MAX_SPLIT_YEAR = 1752
SPLIT_YEAR_MONTHS = ('Jan', 'Feb', 'Mar')

# A bare number in the start date is only read as a year if the range it
# would form is shorter than this.
MAX_YEAR_RANGE = 300

# Days in each month, Feb allowing the 29th (leap years are not checked)
MONTH_LENGTHS = {
    'Jan': 31, 'Feb': 29, 'Mar': 31, 'Apr': 30, 'May': 31, 'Jun': 30,
    'Jul': 31, 'Aug': 31, 'Sep': 30, 'Oct': 31, 'Nov': 30, 'Dec': 31,
}

# Days before the start of month N (index 13 closes December).
# Ignores leap years: "good enough" for comparing dates a few years apart.
MONTH_OFFSETS = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334, 365)
DAYS_PER_YEAR = 365

# Fuzzy day bound tolerances
APPROXIMATE_DAY_TOLERANCE = 10     # Abt/Est with a full date
APPROXIMATE_MONTH_TOLERANCE = 91   # Abt/Est with month and year
APPROXIMATE_YEAR_TOLERANCE = 365   # Abt/Est with year only
OPEN_ENDED_TOLERANCE = 3650        # Bef widens the minimum, Aft the maximum

# Zone used for "today" in the future date check. New Zealand is one of the
# first places to start a new day, so today is never under-counted.
REFERENCE_TIMEZONE = 'Pacific/Auckland'

# Events that happen at a single instant. "From ... to" is reinterpreted as
# "Bet ... and" for these.
DISCRETE_EVENT_TYPES = frozenset({
    'Birth', 'Christening', 'Death', 'Burial',
    'Alt Birth', 'Alt Christening', 'Alt Death', 'Alt Burial',
    'Adoption', 'Baptism', 'Bar Mitzvah', 'Bat Mitzvah', 'Blessing',
    'Confirmation', 'Cremation', 'Degree', 'Emigration', 'First Communion',
    'Funeral', 'Graduation', 'Immigration', 'Naturalization', 'Ordination',
    'Stillborn', 'Will', 'Estate Inventory',
    'Marriage', 'Alt Marriage', 'Marriage License', 'Marriage Bond',
    'Marriage Contract', 'Divorce Filing', 'Divorce', 'Annulment',
})


def is_day(number: int) -> bool:
    """Check if a number could be a day of the month."""
    return MIN_DAY <= number <= MAX_DAY


def is_month_number(number: int) -> bool:
    """Check if a number could be a month."""
    return 1 <= number <= 12


def is_year(number: int) -> bool:
    """Check if a number is an acceptable year."""
    return MIN_YEAR <= number <= MAX_YEAR


def is_double_dating_year(number: int) -> bool:
    """Check if a year may be written as a split year (e.g. 1699/00)."""
    return MIN_SPLIT_YEAR <= number <= MAX_SPLIT_YEAR


def is_discrete_event(event_type: str) -> bool:
    """Check if an event type must be a single instant."""
    return event_type in DISCRETE_EVENT_TYPES
