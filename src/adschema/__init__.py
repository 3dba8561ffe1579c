"""adschema — category-driven ad attribute schema engine."""

__version__ = "0.3.0"
