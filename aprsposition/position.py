"""APRS position value type.

A ``Position`` is the result of every decoder in this package. Coordinates
are normalized on construction by rounding to the nearest 1/100000 degree
(about 1.1 m); the rounding is idempotent, so re-wrapping an already decoded
position never moves it.

Besides holding a fix, a position can re-encode itself:

    to_dms()               "4903.50N" / "07201.75W", honouring ambiguity
    to_compressed_string() "/5L!!<*e7> sT" (base-91, APRS compressed format)
    to_decimal_string()    "49.05833, -72.02917"

and answer simple great-circle questions (``distance``, ``direction``).
"""

import math
from dataclasses import dataclass

from aprsposition.base91 import encode_base91

__all__ = ["Position", "dist_from", "round_degrees"]

_COORDINATE_SCALE = 100000
_EARTH_RADIUS_MILES = 3958.75

# Compressed format scale factors (APRS 1.0.1, chapter 9)
_LATITUDE_BASE91_SCALE = 380926
_LONGITUDE_BASE91_SCALE = 190463

DEFAULT_EXTENSION = " sT"


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def round_degrees(value: float) -> float:
    """Round decimal degrees to the nearest 1e-5 degree.

    Example:
        >>> round_degrees(49.0583333)
        49.05833
    """
    return _round_half_up(value * _COORDINATE_SCALE) / _COORDINATE_SCALE


def dist_from(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in statute miles using the haversine formula.

    Example:
        >>> round(dist_from(0, 0, 0, 1), 2)
        69.09
    """
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(delta_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return _EARTH_RADIUS_MILES * c


@dataclass(frozen=True)
class Position:
    """A decoded APRS position report.

    Attributes:
        latitude: Decimal degrees, positive=North. Rounded to 1e-5.
        longitude: Decimal degrees, positive=East. Rounded to 1e-5.
        ambiguity: Number of blanked trailing digits, 0 (full precision)
            to 4. Decoders substitute the midpoint of the blanked range.
        symbol_table: Symbol table selector (``/``, ``\\``, or an overlay).
        symbol_code: Symbol within the selected table.
        altitude: Feet above MSL, -1 when unknown.
        extension: Data following the symbol code in the compressed format
            (course/speed, altitude or range). Empty values fall back to the
            ``" sT"`` placeholder.

    Example:
        >>> p = Position(49.0583333, -72.0291667, 0, "/", "-")
        >>> p.to_dms(p.latitude, True)
        '4903.50N'
    """

    latitude: float
    longitude: float
    ambiguity: int = 0
    symbol_table: str = "\\"
    symbol_code: str = "."
    altitude: int = -1
    extension: str = DEFAULT_EXTENSION

    def __post_init__(self) -> None:
        object.__setattr__(self, "latitude", round_degrees(self.latitude))
        object.__setattr__(self, "longitude", round_degrees(self.longitude))
        if not self.extension:
            object.__setattr__(self, "extension", DEFAULT_EXTENSION)

    def __str__(self) -> str:
        return f"Latitude:\t{self.latitude:.5f}\nLongitude:\t{self.longitude:.5f}\n"

    def _ambiguous_minutes(self, minutes: int, fraction: int) -> str:
        # "ddmm.ff" with the trailing digits blanked per ambiguity level
        if self.ambiguity == 1:
            return "  .  "
        if self.ambiguity == 2:
            return f"{minutes // 10} .  "
        if self.ambiguity == 3:
            return f"{minutes:02d}.  "
        if self.ambiguity == 4:
            return f"{minutes:02d}.{fraction // 10} "
        return f"{minutes:02d}.{fraction:02d}"

    def to_dms(self, value: float, is_latitude: bool) -> str:
        """Render decimal degrees in the APRS ``DDMM.mmH`` / ``DDDMM.mmH`` form.

        The value is first converted to whole hundredths of a minute, so
        ``49.0583333`` becomes ``4903.50N``. Minute digits are blanked with
        spaces according to this position's ambiguity.

        Args:
            value: Latitude or longitude in decimal degrees.
            is_latitude: Selects 2-digit degrees with N/S (True) or 3-digit
                degrees with E/W (False).

        Returns:
            The fixed-width degree/minute string with hemisphere letter.
        """
        hundredths = _round_half_up(value * 6000)
        negative = hundredths < 0
        hundredths = abs(hundredths)
        degrees = hundredths // 6000
        minutes = (hundredths // 100) % 60
        fraction = hundredths % 100

        rendered = self._ambiguous_minutes(minutes, fraction)
        if is_latitude:
            return f"{degrees:02d}{rendered}{'S' if negative else 'N'}"
        return f"{degrees:03d}{rendered}{'W' if negative else 'E'}"

    def to_decimal_string(self) -> str:
        return f"{self.latitude:.5f}, {self.longitude:.5f}"

    def to_compressed_string(self) -> str:
        """Encode as an APRS compressed position.

        Layout: symbol table, 4 base-91 latitude characters, 4 base-91
        longitude characters, symbol code, then the extension field.
        """
        latitude_value = _round_half_up(_LATITUDE_BASE91_SCALE * (90 - self.latitude))
        longitude_value = _round_half_up(
            _LONGITUDE_BASE91_SCALE * (180 + self.longitude)
        )
        return (
            self.symbol_table
            + encode_base91(latitude_value)
            + encode_base91(longitude_value)
            + self.symbol_code
            + self.extension
        )

    @staticmethod
    def dist_from(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        return dist_from(lat1, lon1, lat2, lon2)

    def distance(self, other: "Position") -> float:
        """Distance in statute miles between this position and ``other``."""
        return dist_from(self.latitude, self.longitude, other.latitude, other.longitude)

    def direction(self, other: "Position") -> float:
        """Initial bearing in degrees [0, 360) from ``other`` to this position.

        This is the forward azimuth that, followed along a great circle,
        leads from ``other`` to ``self``; 0 is North, 90 is East.
        """
        start_lat = math.radians(other.latitude)
        end_lat = math.radians(self.latitude)
        delta_lon = math.radians(self.longitude - other.longitude)
        y = math.sin(delta_lon) * math.cos(end_lat)
        x = math.cos(start_lat) * math.sin(end_lat) - math.sin(start_lat) * math.cos(
            end_lat
        ) * math.cos(delta_lon)
        return (math.degrees(math.atan2(y, x)) + 360) % 360
