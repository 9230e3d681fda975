"""2D vectors, affine transforms, rounded polygon shapes, colors, keyframe sequences and desktop helpers."""

__version__ = "1.0.0"

__all__ = ["color", "native", "sequence", "shape", "transform", "transformable", "vec2"]