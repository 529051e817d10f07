"""Game-related constants shared across UI and core layers."""

TOTAL_ROUNDS: int = 8
OPTIONS_PER_ROUND: int = 3

DEFAULT_COUNTRIES: tuple[str, ...] = (
    "Estonia",
    "France",
    "Germany",
    "Ireland",
    "Italy",
    "Nigeria",
    "Poland",
    "Spain",
    "UK",
    "Ukraine",
    "US",
)
