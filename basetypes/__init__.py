"""Basic data types for robotics: time, temperature, motion and transforms."""

__version__ = "0.1.0"

__all__ = [
    "commands",
    "floats",
    "linalg",
    "named_vector",
    "temperature",
    "time_mark",
    "time_value",
    "timeout",
    "timestamped",
    "transform_with_covariance",
    "twist",
    "twist_with_covariance",
    "waypoint",
    "wrench",
]