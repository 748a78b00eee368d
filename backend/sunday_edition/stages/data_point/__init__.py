"""Weekly data point section."""

from .main import (
    DATA_POINT_LABELS,
    DATA_POINT_ROTATION,
    DATA_UNAVAILABLE,
    build_data_point_prompt,
    generate_data_point,
    iso_week,
    select_data_point_type,
    unavailable_data_point,
)

__all__ = [
    "DATA_POINT_LABELS",
    "DATA_POINT_ROTATION",
    "DATA_UNAVAILABLE",
    "build_data_point_prompt",
    "generate_data_point",
    "iso_week",
    "select_data_point_type",
    "unavailable_data_point",
]
