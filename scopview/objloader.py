"""Loading of Wavefront OBJ models into flat vertex and index buffers.

Only ``v`` lines (three coordinates) and ``f`` lines (triangles or quads)
are read; every other line is ignored.  Vertices are stored five floats
each: a position followed by two texture coordinates.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from os import PathLike

from .textfile import read_file

VERTEX_STRIDE = 5

_WHITESPACE = " \t\n\v\f\r"
_WORD = re.compile(r"[^ \t\n\v\f\r]+")
_FLOAT_PREFIX = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")

Vertex = tuple[float, float, float]
Face = tuple[int, ...]


class ObjParseError(Exception):
    """Raised when an OBJ model is malformed or holds nothing to draw."""


@dataclass
class ObjModel:
    """The vertices and faces read from an OBJ file, indices 1-based."""

    vertices: list[Vertex] = field(default_factory=list)
    triangles: list[tuple[int, int, int]] = field(default_factory=list)
    quads: list[tuple[int, int, int, int]] = field(default_factory=list)


@dataclass
class MeshBuffers:
    """Flat buffers ready for upload: 5 floats per vertex, 0-based indices."""

    vertices: list[float]
    indices: list[int]
    camera_z: float = 0.0

    @property
    def vertex_count(self) -> int:
        """Number of vertices held in the vertex buffer."""
        return len(self.vertices) // VERTEX_STRIDE


def _words(line: str) -> list[str]:
    return _WORD.findall(line)


def _scan_float(word: str) -> float:
    match = _FLOAT_PREFIX.match(word)
    if match is None:
        raise ObjParseError(f"not a number: {word!r}")
    return float(match.group(1))


def _scan_int(word: str) -> int:
    match = _INT_PREFIX.match(word)
    return int(match.group(1)) if match else 0


def parse_vertex(line: str) -> Vertex:
    """Parse a ``v x y z`` line into a tuple of three floats."""
    words = _words(line)
    if not words or words[0] != "v" or len(words) != 4:
        raise ObjParseError(f"invalid vertex line: {line!r}")
    x, y, z = (_scan_float(word) for word in words[1:])
    return (x, y, z)


def parse_face(line: str) -> Face:
    """Parse an ``f`` line with three or four vertex references.

    Only the leading integer of each reference is kept, so ``7/2/3`` reads
    as 7; a reference with no leading integer reads as 0.
    """
    words = _words(line)
    if not words or words[0] != "f" or len(words) not in (4, 5):
        raise ObjParseError(f"invalid face line: {line!r}")
    return tuple(_scan_int(word) for word in words[1:])


def _starts_with(line: str, tag: str) -> bool:
    return len(line) > 1 and line[0] == tag and line[1] in _WHITESPACE


def parse_obj(lines: Iterable[str]) -> ObjModel:
    """Collect the vertices, triangles and quads from the lines of a model."""
    model = ObjModel()
    for number, line in enumerate(lines, start=1):
        try:
            if _starts_with(line, "v"):
                model.vertices.append(parse_vertex(line))
            elif _starts_with(line, "f"):
                face = parse_face(line)
                if len(face) == 3:
                    model.triangles.append(face)  # type: ignore[arg-type]
                else:
                    model.quads.append(face)  # type: ignore[arg-type]
        except ObjParseError as exc:
            raise ObjParseError(f"line {number}: {exc}") from exc
    return model


def build_buffers(model: ObjModel) -> MeshBuffers:
    """Flatten ``model`` into a vertex buffer and a triangle index buffer.

    Texture coordinates are left at zero; quads are split into two
    triangles after all the model's triangles.
    """
    if not model.vertices:
        raise ObjParseError("model holds no vertices")
    if not model.triangles and not model.quads:
        raise ObjParseError("model holds no faces")
    vertices = [
        value
        for x, y, z in model.vertices
        for value in (float(x), float(y), float(z), 0.0, 0.0)
    ]
    indices = [index - 1 for triangle in model.triangles for index in triangle]
    indices.extend(
        index - 1 for a, b, c, d in model.quads for index in (a, b, c, c, d, a)
    )
    return MeshBuffers(vertices, indices)


def _ratio(value: float, low: float, high: float) -> float:
    span = high - low
    numerator = value - low
    if span == 0:
        if numerator == 0:
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / span


def recenter(vertices: list[float]) -> tuple[list[float], float]:
    """Center a 5-float-stride vertex buffer and derive texture coordinates.

    The bounding box always includes the origin.  Each position is shifted
    by the box centre; its texture coordinates become the shifted z and y
    relative to the box.  Returns the new buffer and a camera distance on
    the z axis that keeps the whole model in view.
    """
    positions = [
        vertices[start:start + 3] for start in range(0, len(vertices), VERTEX_STRIDE)
    ]
    high = [max([0.0, *axis]) for axis in zip(*positions)] or [0.0] * 3
    low = [min([0.0, *axis]) for axis in zip(*positions)] or [0.0] * 3
    centre = [lo + (hi - lo) / 2 for lo, hi in zip(low, high)]

    result: list[float] = []
    for position in positions:
        x, y, z = (value - shift for value, shift in zip(position, centre))
        result.extend(
            (x, y, z, _ratio(z, low[2], high[2]), _ratio(y, low[1], high[1]))
        )
    camera_z = -max(hi - lo for lo, hi in zip(low, high)) * 1.5
    return result, camera_z


def load_obj(path: str | PathLike[str]) -> MeshBuffers:
    """Read the model at ``path`` and return centred buffers.

    Raises FileReadError when the file cannot be read and ObjParseError
    when its content is invalid.
    """
    model = parse_obj(read_file(path).split("\n"))
    buffers = build_buffers(model)
    vertices, camera_z = recenter(buffers.vertices)
    return MeshBuffers(vertices, buffers.indices, camera_z)