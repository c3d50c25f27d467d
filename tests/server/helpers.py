"""Sample sentences for server tests."""

RMC_VALID = "$GPRMC,081836,A,3751.65,S,14507.36,E,000.0,360.0,130998,011.3,E*62"
VTG_VALID = "$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B"
RMC_NO_CHECKSUM = "$GPRMC,,V,,,,,,,,,,N"
UNKNOWN_TYPE = "$GPXYZ,1,2,3*50"


def with_bad_checksum(sentence: str) -> str:
    return sentence[:-2] + "00"
