"""
Decoder for the compact polyline encoding used by Valhalla edge shapes.

Each coordinate is a latitude delta followed by a longitude delta, both
zig-zag encoded and split into 5-bit groups (least significant first), each
group offset by 63 with 0x20 marking that another group follows.
"""


class DecodeError(ValueError):
    pass


DEFAULT_PRECISION = 6

# A 32-bit zig-zag value never needs more than 7 five-bit groups
MAX_GROUPS = 7


def _read_delta(encoded: str, index: int) -> tuple[int, int]:
    """Read one signed delta starting at index. Returns (delta, next_index)."""
    result = 0
    shift = 0
    while True:
        if index >= len(encoded):
            raise DecodeError("truncated varint")
        if shift >= MAX_GROUPS * 5:
            raise DecodeError(f"varint overflow at offset {index}")
        byte = ord(encoded[index]) - 63
        # valid characters are '?' (63) through '~' (126)
        if byte < 0 or byte > 0x3F:
            raise DecodeError(f"invalid character {encoded[index]!r} at offset {index}")
        index += 1
        result |= (byte & 0x1F) << shift
        shift += 5
        if byte < 0x20:
            break

    delta = ~(result >> 1) if result & 1 else result >> 1
    return delta, index


def decode(encoded: str, precision: int = DEFAULT_PRECISION) -> list[tuple[float, float]]:
    """
    Decode an encoded polyline into a list of (lon, lat) tuples.
    Valhalla uses precision 6; Google-style polylines use 5.
    """
    factor = 10 ** precision
    index = 0
    lat = 0
    lon = 0
    coordinates: list[tuple[float, float]] = []

    while index < len(encoded):
        lat_change, index = _read_delta(encoded, index)
        lon_change, index = _read_delta(encoded, index)
        lat += lat_change
        lon += lon_change
        coordinates.append((lon / factor, lat / factor))  # lon first

    return coordinates
