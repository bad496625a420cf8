from typing import Tuple
import numpy as np

Color = Tuple[float, float, float]

BLUE: Color = (0.0, 0.0, 1.0)
RED: Color = (1.0, 0.0, 0.0)


def field_to_rgba(
    field: np.ndarray,
    low: Color = BLUE,
    high: Color = RED,
    clamp: float = 1.0
) -> np.ndarray:
    """
    Map a scalar field to RGBA bytes for texture upload.

    Negative values interpolate linearly from black to ``low`` and positive
    values from black to ``high``, reaching the full color at ``|u| = clamp``.
    Larger magnitudes saturate.

    Parameters
    ----------
    field : np.ndarray
        Displacement values, any shape.
    low : tuple of float, default=BLUE
        RGB color in [0, 1] for negative displacement.
    high : tuple of float, default=RED
        RGB color in [0, 1] for positive displacement.
    clamp : float, default=1.0
        Magnitude mapped to the full color.

    Returns
    -------
    np.ndarray
        ``uint8`` array of shape ``(field.size, 4)``; alpha is opaque.
    """
    if clamp <= 0:
        raise ValueError(f"clamp must be positive, got {clamp}")

    u = np.ravel(np.asarray(field, dtype=float))
    weight = np.clip(np.abs(u) / clamp, 0.0, 1.0)
    weight = np.nan_to_num(weight, nan=0.0)

    colors = np.where((u < 0)[:, None], np.array(low), np.array(high))

    rgba = np.empty((u.size, 4), dtype=np.uint8)
    rgba[:, :3] = (weight[:, None] * colors * 255.0).astype(np.uint8)
    rgba[:, 3] = 255
    return rgba
