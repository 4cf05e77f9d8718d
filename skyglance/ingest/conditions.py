"""WMO weather code to Condition lookup used by Open-Meteo responses."""

from skyglance.models.weather import Condition

_CODE_GROUPS: dict[Condition, tuple[int, ...]] = {
    Condition.CLEAR: (0,),
    Condition.PARTLY_CLOUDY: (1, 2),
    Condition.CLOUDY: (3,),
    Condition.FOG: (45, 48),
    # drizzle, rain, rain showers
    Condition.RAIN: (51, 53, 55, 56, 57, 61, 63, 65, 80, 81, 82),
    # freezing rain
    Condition.SLEET: (66, 67),
    # snow, snow grains, snow showers
    Condition.SNOW: (71, 73, 75, 77, 85, 86),
    Condition.STORM: (95, 96, 99),
}

WEATHER_CODES: dict[int, Condition] = {
    code: condition for condition, codes in _CODE_GROUPS.items() for code in codes
}

DEFAULT_CONDITION = Condition.CLOUDY


def map_condition(code: int | None) -> Condition:
    if code is None:
        return DEFAULT_CONDITION
    return WEATHER_CODES.get(int(code), DEFAULT_CONDITION)
