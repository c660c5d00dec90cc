"""Column value types: typed identifiers, nullable values, JSON, arrays and geometry."""

from __future__ import annotations

import json
import math
import uuid
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Generic, Iterable, TypeVar

from shapely import wkb as shapely_wkb
from shapely.geometry.base import BaseGeometry

T = TypeVar("T")


class ScanError(ValueError):
    """A database value could not be converted to the target type."""


def scan_typed_id_uuid(value: Any, constructor: Callable[[uuid.UUID], T]) -> T:
    """Parse a UUID string and build an identifier from it."""
    if not isinstance(value, str):
        raise ScanError(f"string expected: got {type(value).__name__}")
    try:
        parsed = uuid.UUID(value)
    except ValueError as err:
        raise ScanError(f"parse uuid: {value}: {err}") from err
    return constructor(parsed)


def scan_typed_id_str(value: Any, constructor: Callable[[str], T]) -> T:
    """Build an identifier from a string value."""
    if not isinstance(value, str):
        raise ScanError(f"string expected: got {type(value).__name__}")
    return constructor(value)


def render_sql_driver_value(value: Any) -> str:
    """The string form of an identifier, as stored in the database."""
    return str(value)


@dataclass(frozen=True)
class SqlNull(Generic[T]):
    """A value that may be SQL NULL; ``valid`` is False for NULL."""

    value: T | None = None
    valid: bool = False


def new_sql_null(value: T | None) -> SqlNull[T]:
    """NULL for None, otherwise a valid wrapper around the value."""
    if value is None:
        return SqlNull(None, False)
    return SqlNull(value, True)


@dataclass
class Json(Generic[T]):
    """Data stored in a JSON column."""

    data: Any = None

    def scan(self, value: Any) -> None:
        """Decode JSON bytes read from the database into ``data``."""
        if not isinstance(value, (bytes, bytearray)):
            raise ScanError(f"expected []byte to unmarshal to json: got {type(value).__name__}")
        self.data = json.loads(bytes(value))

    def value(self) -> bytes:
        """The data encoded as JSON bytes."""
        return json.dumps(self.data, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


class Slice(list):
    """A list stored in an array column."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        super().__init__(items)

    def scan(self, value: Any) -> None:
        """Replace the contents with a list read from the database."""
        if not isinstance(value, list):
            raise ScanError(f"expected slice type to unmarshal: got {type(value).__name__}")
        self[:] = value

    def value(self) -> list:
        """The contents as a plain list."""
        return list(self)


def _num(x: float) -> str:
    x = float(x)
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "+Inf" if x > 0 else "-Inf"
    text = format(Decimal(repr(x)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _coords(coords: Iterable[Any]) -> str:
    return ",".join(f"{_num(c[0])} {_num(c[1])}" for c in coords)


def _rings(polygon: Any) -> str:
    rings = [polygon.exterior, *polygon.interiors]
    return ",".join(f"({_coords(ring.coords)})" for ring in rings)


def _to_wkt(geom: BaseGeometry) -> str:
    kind = geom.geom_type
    if kind == "Point":
        if geom.is_empty:
            return "POINT EMPTY"
        return f"POINT({_num(geom.x)} {_num(geom.y)})"
    if kind in ("LineString", "LinearRing"):
        if geom.is_empty:
            return "LINESTRING EMPTY"
        return f"LINESTRING({_coords(geom.coords)})"
    if kind == "Polygon":
        if geom.is_empty:
            return "POLYGON EMPTY"
        return f"POLYGON({_rings(geom)})"
    if geom.is_empty:
        return f"{kind.upper()} EMPTY"
    parts = list(geom.geoms)
    if kind == "MultiPoint":
        return "MULTIPOINT(" + ",".join(f"({_num(p.x)} {_num(p.y)})" for p in parts) + ")"
    if kind == "MultiLineString":
        return "MULTILINESTRING(" + ",".join(f"({_coords(line.coords)})" for line in parts) + ")"
    if kind == "MultiPolygon":
        return "MULTIPOLYGON(" + ",".join(f"({_rings(p)})" for p in parts) + ")"
    return "GEOMETRYCOLLECTION(" + ",".join(_to_wkt(g) for g in parts) + ")"


@dataclass
class Geometry:
    """A spatial column value: read as hex WKB, written as WKT."""

    geometry: BaseGeometry | None = None

    def scan(self, value: Any) -> None:
        """Decode a hex-encoded WKB string read from the database."""
        if not isinstance(value, str):
            raise ScanError(f"value is not a valid string: '{value}'")
        try:
            raw = bytes.fromhex(value)
        except ValueError as err:
            raise ScanError(f"invalid hex geometry: {err}") from err
        try:
            self.geometry = shapely_wkb.loads(raw)
        except Exception as err:
            raise ScanError(f"invalid wkb geometry: {err}") from err

    def value(self) -> str:
        """The geometry as WKT."""
        if self.geometry is None:
            raise ValueError("no geometry to render")
        return _to_wkt(self.geometry)