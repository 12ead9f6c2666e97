"""
Carton Geometry

Resolves the carton used for a shipment, either from a pair-count preset
or from caller-supplied dimensions, and derives its volume.
"""

from typing import Literal, NamedTuple

import polars as pl

from .presets import PRESET_CARTONS, FALLBACK_PRESET


CartonMode = Literal["Preset", "Custom"]

MODE_PRESET = "Preset"
MODE_CUSTOM = "Custom"


class CartonDimensions(NamedTuple):
    """Outer carton dimensions in centimetres."""
    length_cm: float
    width_cm: float
    height_cm: float

    @property
    def volume_cm3(self) -> float:
        return carton_volume_cm3(self)


def carton_volume_cm3(carton: CartonDimensions) -> float:
    """Volume = L x W x H (cm3)."""
    return carton.length_cm * carton.width_cm * carton.height_cm


def normalize_mode(mode: str) -> str:
    """Map a user supplied mode string onto MODE_PRESET or MODE_CUSTOM."""
    value = str(mode).strip().lower()
    if value == MODE_PRESET.lower():
        return MODE_PRESET
    if value == MODE_CUSTOM.lower():
        return MODE_CUSTOM
    raise ValueError(f"Carton mode must be 'Preset' or 'Custom', got '{mode}'")


def preset_carton(preset_index: int | None) -> CartonDimensions:
    """Preset carton for a pair count, falling back to the 1-pair carton."""
    dims = PRESET_CARTONS.get(preset_index, PRESET_CARTONS[FALLBACK_PRESET])
    return CartonDimensions(*dims)


def resolve_carton(
    mode: CartonMode,
    preset_index: int | None = None,
    custom_dims: tuple[float, float, float] | None = None,
) -> CartonDimensions:
    """
    Resolve the effective carton for a shipment.

    Args:
        mode: "Preset" or "Custom"
        preset_index: Pair count used to select the preset (Preset mode)
        custom_dims: (length, width, height) in cm (Custom mode)

    Returns:
        CartonDimensions. Preset mode never fails: an unknown index
        falls back to the 1-pair carton. Custom dimensions are returned
        as supplied; range checks belong to the caller.
    """
    if normalize_mode(mode) == MODE_PRESET:
        return preset_carton(preset_index)

    if custom_dims is None:
        raise ValueError("Custom carton mode requires custom_dims")
    return CartonDimensions(*(float(d) for d in custom_dims))


def presets_frame() -> pl.DataFrame:
    """Preset cartons as a DataFrame keyed by preset_pairs."""
    return pl.DataFrame(
        {
            "preset_pairs": list(PRESET_CARTONS),
            "_preset_length_cm": [d[0] for d in PRESET_CARTONS.values()],
            "_preset_width_cm": [d[1] for d in PRESET_CARTONS.values()],
            "_preset_height_cm": [d[2] for d in PRESET_CARTONS.values()],
        },
        schema={
            "preset_pairs": pl.Int64,
            "_preset_length_cm": pl.Float64,
            "_preset_width_cm": pl.Float64,
            "_preset_height_cm": pl.Float64,
        },
    )


__all__ = [
    "CartonDimensions",
    "CartonMode",
    "MODE_PRESET",
    "MODE_CUSTOM",
    "PRESET_CARTONS",
    "FALLBACK_PRESET",
    "carton_volume_cm3",
    "normalize_mode",
    "preset_carton",
    "presets_frame",
    "resolve_carton",
]
