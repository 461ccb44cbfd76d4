"""Pydantic schemas for validating point payloads."""

from typing import Any

from pydantic import BaseModel

from vector2d.vector import Vector


class PointSchema(BaseModel):
    """2D point with numeric components."""

    x: float = 0.0
    y: float = 0.0


def parse_point(data: Any) -> Vector:
    """Validate a mapping or attribute object and build a Vector from it.

    Raises:
        pydantic.ValidationError: if a component is not a number.
    """
    if isinstance(data, dict):
        schema = PointSchema.model_validate(data)
    else:
        schema = PointSchema.model_validate(data, from_attributes=True)
    return Vector(schema.x, schema.y)


def parse_point_json(text: str) -> Vector:
    """Validate a JSON object string such as '{"x": 1, "y": 2}'."""
    schema = PointSchema.model_validate_json(text)
    return Vector(schema.x, schema.y)


def dump_point(vector: Vector) -> dict[str, float]:
    """Validated {"x": ..., "y": ...} dict for a vector."""
    return PointSchema(x=vector.x, y=vector.y).model_dump()
