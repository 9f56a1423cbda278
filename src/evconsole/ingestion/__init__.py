"""Input normalization for values arriving from forms and the backend."""

from evconsole.ingestion.normalize import coerce_float, coerce_int, safe_float, safe_int, safe_str

__all__ = ["coerce_float", "coerce_int", "safe_float", "safe_int", "safe_str"]
