import math

EARTH_RADIUS_KM = 6371


def round_one_decimal(value: float) -> float:
    """Round half away from zero to one decimal place."""
    return math.copysign(math.floor(abs(value) * 10 + 0.5) / 10, value)


def haversine_km(lat1, lon1, lat2, lon2) -> float:
    """
    Great-circle distance in km between two points given in decimal degrees,
    rounded to one decimal. Coordinates are not range-checked.
    """
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(d_lon / 2) ** 2
    )
    # float error can push antipodal points just past 1.0
    a = min(1.0, a)

    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return round_one_decimal(EARTH_RADIUS_KM * c)
