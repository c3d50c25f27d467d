"""NMEA data types for classified and decoded sentences.

This module defines the sentence kinds, the closed sets of character codes
that appear inside sentences, and dataclasses for structured sentence data.

Design Decisions:
    1. Fixed-point numbers (FixedPoint): decimal fields keep the exact
       precision the receiver transmitted. An empty field decodes to a
       FixedPoint with scale 0, which distinguishes "no data received" from
       "measured zero" without resorting to None or float NaN.

    2. Signed coordinates: latitude and longitude already carry the
       hemisphere sign (S/W negative), so consumers never see a separate
       direction field. Use ``to_coordinate`` for decimal degrees.

    3. Enums for character codes: FAA modes, GLL status and GSA modes are
       str enums, so ``record.faa_mode == "A"`` still reads naturally while
       unknown codes are rejected at decode time. Empty optional codes are
       None.
"""

import enum
from dataclasses import dataclass, field

from navdecode.nmea.fixed import FixedPoint
from navdecode.nmea.timestamp import CalendarDate, TimeOfDay

__all__ = [
    "FaaMode",
    "GGAData",
    "GLLData",
    "GSAData",
    "GSTData",
    "GSVData",
    "GllStatus",
    "GsaFixType",
    "GsaMode",
    "LAAData",
    "LAEData",
    "LAUData",
    "RMCData",
    "RMZData",
    "SatelliteInfo",
    "SentenceKind",
    "VTGData",
    "ZDAData",
]


class SentenceKind(enum.Enum):
    """Classification result for one line.

    INVALID means the line failed structural checks before the type could
    be read; UNKNOWN means it is well formed but of a type we do not decode.
    """

    INVALID = -1
    UNKNOWN = 0
    RMC = 1
    GGA = 2
    GSA = 3
    GLL = 4
    GST = 5
    GSV = 6
    VTG = 7
    ZDA = 8
    FLARM_LAU = 9  # heartbeat, status and basic alarms
    FLARM_LAA = 10  # data on other proximate aircraft
    FLARM_LAE = 11  # self-test result and error codes
    GARMIN_RMZ = 12  # barometric altitude
    FLARM_LAR = 13  # reset
    FLARM_LAF = 14  # simulated traffic and alarms


class FaaMode(str, enum.Enum):
    """FAA mode indicator (NMEA 2.3+)."""

    AUTONOMOUS = "A"
    DIFFERENTIAL = "D"
    ESTIMATED = "E"
    MANUAL = "M"
    SIMULATED = "S"
    NOT_VALID = "N"
    PRECISE = "P"


class GllStatus(str, enum.Enum):
    DATA_VALID = "A"
    DATA_NOT_VALID = "V"


class GsaMode(str, enum.Enum):
    AUTO = "A"
    FORCED = "M"


class GsaFixType(enum.IntEnum):
    NONE = 1
    FIX_2D = 2
    FIX_3D = 3


@dataclass
class RMCData:
    """Parsed RMC (Recommended Minimum Specific GNSS Data) sentence.

    Attributes:
        time: UTC time of the fix.
        valid: Navigation validity flag, True when the status field is 'A'.
        latitude: Signed DDMM.MMMM latitude, positive=North.
        longitude: Signed DDDMM.MMMM longitude, positive=East.
        speed: Speed over ground in knots.
        course: Course over ground in degrees true.
        date: UTC date of the fix.
        variation: Signed magnetic variation in degrees, positive=East.
        faa_mode: FAA mode indicator, None on pre-2.3 receivers.

    Example:
        >>> rmc = parse_rmc("$GPRMC,081836,A,3751.65,S,14507.36,E,000.0,360.0,130998,011.3,E*62")
        >>> rmc.latitude
        FixedPoint(value=-375165, scale=100)
        >>> rmc.date
        CalendarDate(day=13, month=9, year=1998)
    """

    time: TimeOfDay
    valid: bool
    latitude: FixedPoint
    longitude: FixedPoint
    speed: FixedPoint
    course: FixedPoint
    date: CalendarDate
    variation: FixedPoint
    faa_mode: FaaMode | None = None


@dataclass
class GGAData:
    """Parsed GGA (Global Positioning System Fix Data) sentence.

    Attributes:
        time: UTC time of the fix.
        latitude: Signed DDMM.MMMM latitude, positive=North.
        longitude: Signed DDDMM.MMMM longitude, positive=East.
        fix_quality: GPS fix quality indicator (0 when the field is empty):
            0 = Invalid (no fix)
            1 = GPS fix (SPS)
            2 = DGPS fix
            4 = RTK Fixed
            5 = RTK Float
            6 = Dead reckoning
        satellites_tracked: Number of satellites used in the fix.
        hdop: Horizontal dilution of precision.
        altitude: Altitude above mean sea level.
        altitude_units: Unit letter for altitude, normally 'M'.
        height: Geoid separation above the WGS84 ellipsoid.
        height_units: Unit letter for height, normally 'M'.
        dgps_age: Age of differential corrections in seconds.
    """

    time: TimeOfDay
    latitude: FixedPoint
    longitude: FixedPoint
    fix_quality: int
    satellites_tracked: int
    hdop: FixedPoint
    altitude: FixedPoint
    altitude_units: str
    height: FixedPoint
    height_units: str
    dgps_age: FixedPoint

    @property
    def valid(self) -> bool:
        """Navigation validity: only valid if the receiver reports a fix."""
        return self.fix_quality > 0


@dataclass
class GSAData:
    """Parsed GSA (DOP and Active Satellites) sentence.

    ``sats`` always holds twelve PRNs; unused slots are 0.
    """

    mode: GsaMode | None
    fix_type: GsaFixType | None
    sats: tuple[int, ...]
    pdop: FixedPoint
    hdop: FixedPoint
    vdop: FixedPoint


@dataclass
class GLLData:
    """Parsed GLL (Geographic Position, Latitude/Longitude) sentence."""

    latitude: FixedPoint
    longitude: FixedPoint
    time: TimeOfDay
    status: GllStatus | None
    faa_mode: FaaMode | None = None


@dataclass
class GSTData:
    """Parsed GST (Pseudorange Noise Statistics) sentence.

    Deviations are in meters, the orientation in degrees from true north.
    """

    time: TimeOfDay
    rms_deviation: FixedPoint
    semi_major_deviation: FixedPoint
    semi_minor_deviation: FixedPoint
    semi_major_orientation: FixedPoint
    latitude_error_deviation: FixedPoint
    longitude_error_deviation: FixedPoint
    altitude_error_deviation: FixedPoint


@dataclass
class SatelliteInfo:
    nr: int
    elevation: int
    azimuth: int
    snr: int


@dataclass
class GSVData:
    """Parsed GSV (Satellites in View) sentence.

    A full satellite list spans ``total_msgs`` sentences; this record holds
    the (up to four) satellites carried by message ``msg_nr``.
    """

    total_msgs: int
    msg_nr: int
    total_sats: int
    sats: list[SatelliteInfo] = field(default_factory=list)


@dataclass
class VTGData:
    """Parsed VTG (Track Made Good and Ground Speed) sentence.

    Attributes:
        true_track_degrees: Track relative to true north. Unknown when
            stationary (no heading without movement).
        magnetic_track_degrees: Track relative to magnetic north.
        speed_knots: Ground speed in knots.
        speed_kph: Ground speed in km/h.
        faa_mode: FAA mode indicator, None on pre-2.3 receivers.
    """

    true_track_degrees: FixedPoint
    magnetic_track_degrees: FixedPoint
    speed_knots: FixedPoint
    speed_kph: FixedPoint
    faa_mode: FaaMode | None = None

    @property
    def valid(self) -> bool:
        """Velocity is usable only with a mode that is not 'N'."""
        return self.faa_mode is not None and self.faa_mode != FaaMode.NOT_VALID


@dataclass
class ZDAData:
    """Parsed ZDA (Time and Date) sentence, with the local zone offset."""

    time: TimeOfDay
    date: CalendarDate
    hour_offset: int
    minute_offset: int


@dataclass
class LAUData:
    """Parsed FLARM PFLAU (heartbeat, status and basic alarms) sentence.

    Attributes:
        rx: Number of devices with unique IDs currently received (0-99).
        tx: Transmission status (0 or 1).
        gps: GPS status (0 = no fix, 1 = on ground, 2 = airborne).
        power: Power status (0 or 1).
        alarm_level: Alarm level (0-3).
        relative_bearing: Bearing to the most relevant target (-180 to 180).
        alarm_type: Two-digit hex alarm type.
        relative_vertical: Vertical separation in meters.
        relative_distance: Horizontal distance in meters.
        id: Six-digit hex ID of the target; empty before protocol version 4.
    """

    rx: int
    tx: int
    gps: int
    power: int
    alarm_level: int
    relative_bearing: int
    alarm_type: str
    relative_vertical: int
    relative_distance: int
    id: str = ""


@dataclass
class LAAData:
    """Parsed FLARM PFLAA (data on other proximate aircraft) sentence.

    ``no_track``, ``source`` and ``rssi`` are 0 when older protocol
    versions omit them.
    """

    alarm_level: int
    relative_north: int
    relative_east: int
    relative_vertical: int
    id_type: int
    id: str
    track: int
    turn_rate: int
    ground_speed: int
    climb_rate: FixedPoint
    aircraft_type: int
    no_track: int = 0
    source: int = 0
    rssi: int = 0


@dataclass
class LAEData:
    """Parsed FLARM PFLAE (self-test result and error codes) sentence."""

    query_type: str
    severity: int
    error_code: str
    message: str = ""


@dataclass
class RMZData:
    """Parsed Garmin PGRMZ (barometric altitude) sentence.

    ``unit`` is 'f' for feet; ``position_fix_dimension`` is 2 or 3.
    """

    barometric_altitude: int
    unit: str
    position_fix_dimension: int
