"""Discrete color palettes for labeling clusters and samples.

Three generators are wrapped by :func:`discrete_color_palette`:

- ``celda``: hue x saturation/value grid (:func:`distinct_colors`)
- ``ggplot``: evenly spaced hues at fixed luminance and chroma
- ``random``: k-means centers over a seeded sample of RGB space
"""

import math
from typing import List, Sequence, Tuple

import matplotlib.colors as mcolors
import numpy as np
from scipy.cluster.vq import kmeans2

DEFAULT_HUES = (
    "red", "cyan", "orange", "blue", "yellow", "darkviolet", "green", "magenta",
)

PALETTES = ("random", "ggplot", "celda")

# D65 white point used by the polar Luv conversion.
_WHITE_XYZ = (95.047, 100.0, 108.883)


def distinct_colors(
    n: int,
    hues: Sequence[str] = DEFAULT_HUES,
    saturation_range: Tuple[float, float] = (0.7, 1.0),
    value_range: Tuple[float, float] = (0.7, 1.0),
) -> List[str]:
    """Generate a distinct palette for coloring different clusters.

    Each base hue is repeated with saturation increasing and value
    decreasing, so the two stay anticorrelated.

    Parameters
    ----------
    n : int
        Number of colors to generate.
    hues : Sequence[str]
        Named colors (CSS4 names) used as base hues.
    saturation_range : Tuple[float, float]
        Saturation bounds in [0, 1].
    value_range : Tuple[float, float]
        Value (brightness) bounds in [0, 1].

    Returns
    -------
    List[str]
        ``n`` hex color codes.
    """
    unknown = [h for h in hues if h not in mcolors.CSS4_COLORS]
    if unknown:
        raise ValueError(f"Only named CSS4 colors can be used in 'hues': {unknown}")
    if n <= 0:
        return []

    rgb = np.array([mcolors.to_rgb(h) for h in hues])
    base_hues = mcolors.rgb_to_hsv(rgb)[:, 0]

    n_levels = math.ceil(n / len(hues))
    saturations = np.linspace(saturation_range[0], saturation_range[1], n_levels)
    values = np.linspace(value_range[1], value_range[0], n_levels)

    colors = []
    for s, v in zip(saturations, values):
        for h in base_hues:
            colors.append(mcolors.to_hex(mcolors.hsv_to_rgb((h, s, v))))
    return colors[:n]


def hcl_to_hex(h: float, c: float = 100.0, l: float = 65.0) -> str:
    """Convert a polar Luv (HCL) color to a clipped sRGB hex code."""
    hr = math.radians(h)
    u, v = c * math.cos(hr), c * math.sin(hr)

    xn, yn, zn = _WHITE_XYZ
    denom = xn + 15 * yn + 3 * zn
    un, vn = 4 * xn / denom, 9 * yn / denom

    if l <= 0:
        return "#000000"
    y = yn * (((l + 16) / 116) ** 3 if l > 8 else l / 903.3)
    up = u / (13 * l) + un
    vp = v / (13 * l) + vn
    x = 9.0 * y * up / (4 * vp)
    z = -x / 3 - 5 * y + 3 * y / vp

    xyz = np.array([x, y, z]) / 100.0
    m = np.array([
        [3.240479, -1.537150, -0.498535],
        [-0.969256, 1.875992, 0.041556],
        [0.055648, -0.204043, 1.057311],
    ])
    linear = m @ xyz
    srgb = np.where(
        linear <= 0.0031308,
        12.92 * linear,
        1.055 * np.power(np.clip(linear, 0, None), 1 / 2.4) - 0.055,
    )
    return mcolors.to_hex(np.clip(srgb, 0.0, 1.0))


def ggplot_colors(n: int) -> List[str]:
    """Evenly spaced hues, the default discrete scale of ggplot."""
    if n <= 0:
        return []
    hues = np.linspace(15, 375, n + 1)[:n]
    return [hcl_to_hex(h, c=100.0, l=65.0) for h in hues]


def random_colors(n: int, seed: int = 12345, n_samples: int = 5000) -> List[str]:
    """k-means centers of a seeded uniform sample of RGB space, sorted."""
    if n <= 0:
        return []
    rng = np.random.default_rng(seed)
    space = rng.uniform(0.0, 1.0, size=(max(n_samples, n), 3))
    centers, _ = kmeans2(space, n, iter=20, minit="++", seed=seed)
    return sorted(mcolors.to_hex(np.clip(c, 0.0, 1.0)) for c in centers)


def discrete_color_palette(
    n: int,
    palette: str = "random",
    seed: int = 12345,
    **kwargs,
) -> List[str]:
    """Generate ``n`` color codes with the selected method.

    Parameters
    ----------
    n : int
        Number of colors.
    palette : str
        ``random``, ``ggplot`` or ``celda``.
    seed : int
        Seed for the ``random`` method.
    **kwargs
        Passed to :func:`distinct_colors` for ``celda``.

    Returns
    -------
    List[str]
        Hex color codes.
    """
    if palette == "random":
        return random_colors(n, seed=seed)
    if palette == "ggplot":
        return ggplot_colors(n)
    if palette == "celda":
        return distinct_colors(n, **kwargs)
    raise ValueError(f"Unknown palette: '{palette}'. Available: {list(PALETTES)}")
