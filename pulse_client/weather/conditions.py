"""WMO weather code labels."""

WEATHER_CONDITIONS: dict[int, str] = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Foggy",
    48: "Depositing rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    71: "Slight snow",
    73: "Moderate snow",
    75: "Heavy snow",
    95: "Thunderstorm",
    96: "Thunderstorm with light hail",
    99: "Thunderstorm with heavy hail",
}

UNKNOWN_CONDITION = "Unknown"

# Checked in order; first keyword found in the label wins.
_EMOJI = [
    ("clear", "☀️"),
    ("cloud", "⛅"),
    ("rain", "🌧️"),
    ("drizzle", "🌧️"),
    ("snow", "❄️"),
    ("thunder", "⛈️"),
    ("fog", "🌫️"),
]


def weather_condition(code: int) -> str:
    """Human-readable label for a weather code."""
    return WEATHER_CONDITIONS.get(code, UNKNOWN_CONDITION)


def weather_emoji(conditions: str) -> str:
    """Emoji for a condition label."""
    lower = conditions.lower()
    for keyword, emoji in _EMOJI:
        if keyword in lower:
            return emoji
    return "🌡️"
