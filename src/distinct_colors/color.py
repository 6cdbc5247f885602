# Copyright 2025 ICube (University of Strasbourg - CNRS)
# author: Julien PONTABRY (ICube)
#
# This software is a computer program whose purpose is to generate sets of
# visually distinct colors, for instance to tell apart the series of a chart
# or the nodes of a graph.
#
# This software is governed by the CeCILL-B license under French law and
# abiding by the rules of distribution of free software. You can use,
# modify and/or redistribute the software under the terms of the CeCILL-B
# license as circulated by CEA, CNRS and INRIA at the following URL
# "http://www.cecill.info".
#
# As a counterpart to the access to the source code and rights to copy,
# modify and redistribute granted by the license, users are provided only
# with a limited warranty and the software's author, the holder of the
# economic rights, and the successive licensors have only limited
# liability.
#
# In this respect, the user's attention is drawn to the risks associated
# with loading, using, modifying and/or developing or reproducing the
# software by the user in light of its specific status of free software,
# that may mean that it is complicated to manipulate, and that also
# therefore means that it is reserved for developers and experienced
# professionals having in-depth computer knowledge. Users are therefore
# encouraged to load and test the software's suitability as regards their
# requirements in conditions enabling the security of their systems and/or
# data to be ensured and, more generally, to use and operate it in the
# same conditions as regards security.
#
# The fact that you are presently reading this means that you have had
# knowledge of the CeCILL-B license and that you accept its terms.

"""Generation of visually distinct colors.

Colors are picked by evenly sampling the hue around the HSB color wheel, at a
fixed saturation and brightness, and are rendered as hexadecimal RGB strings.

The conversion from HSB to RGB is carried in single precision, so that the
rounding of each channel is the same as in the usual HSB conversion routines
of graphical toolkits.
"""

import logging
from abc import ABC, abstractmethod
from numbers import Integral
from typing import Any, Iterable

import numpy as np

logger = logging.getLogger(__name__)

SATURATION = np.float32(0.7)
BRIGHTNESS = np.float32(0.9)

__ONE = np.float32(1)
__SIX = np.float32(6)
__SCALE = np.float32(255)
__HALF = np.float32(0.5)


class InvalidColorCount(ValueError):
    def __init__(self, n: Any):
        super().__init__(f"The number of colors must be a non-negative integer (got {n!r})!")


def hsb_to_rgb(hue: float | Iterable[float], saturation: float, brightness: float) -> np.ndarray:
    """Convert HSB colors to 8-bit RGB colors.

    The hue is wrapped onto the [0, 1) range and the wheel is divided into six
    sectors. Each channel in [0, 1] is scaled to [0, 255] by rounding half up.
    With a null saturation, the three channels are equal to the brightness.

    Parameters
    ----------
    hue : float or iterable of float
        A single hue or a sequence of hues.
    saturation : float
        The saturation, in [0, 1].
    brightness : float
        The brightness, in [0, 1].

    Returns
    -------
    numpy.ndarray
        The RGB channels as unsigned bytes, of shape (3,) for a single hue or
        (n, 3) for n hues.

    Examples
    --------
    >>> hsb_to_rgb(0, 0.7, 0.9).tolist()
    [230, 69, 69]
    >>> hsb_to_rgb([0.25, 0.5], 0.7, 0.9).tolist()
    [[149, 230, 69], [69, 230, 230]]
    >>> hsb_to_rgb(0.3, 0, 0.5).tolist()
    [128, 128, 128]
    """
    hue = np.asarray(hue, dtype=np.float32)
    s = np.float32(saturation)
    b = np.float32(brightness)

    h = (hue - np.floor(hue)) * __SIX
    f = h - np.floor(h)
    p = np.broadcast_to(b * (__ONE - s), h.shape)
    q = b * (__ONE - s * f)
    t = b * (__ONE - s * (__ONE - f))
    b = np.broadcast_to(b, h.shape)

    sector = h.astype(np.int64) % 6
    rgb = np.stack([np.choose(sector, (b, q, p, p, t, b)),
                    np.choose(sector, (t, b, b, q, p, p)),
                    np.choose(sector, (p, p, t, b, b, q))], axis=-1)

    return (rgb * __SCALE + __HALF).astype(np.uint8)


def rgb_to_hex(rgb: Iterable[int]) -> str:
    """Format an RGB triple as a lowercase hexadecimal string.

    >>> rgb_to_hex((230, 69, 69))
    '#e64545'
    >>> rgb_to_hex([0, 10, 255])
    '#000aff'
    """
    return '#' + ''.join(f'{int(channel):02x}' for channel in rgb)


def _check_count(n: Any) -> int:
    if isinstance(n, bool) or not isinstance(n, Integral) or n < 0:
        raise InvalidColorCount(n)
    return int(n)


class ColorsInterpolator(ABC):
    @abstractmethod
    def sample(self, n: int) -> np.ndarray:
        raise RuntimeError("Class not meant to be instantiated!")


class HueInterpolator(ColorsInterpolator):
    """Sample colors evenly spaced in hue, at fixed saturation and brightness.

    The i-th of n colors has the hue i/n, so the colors are ordered by
    ascending hue, starting from red.
    """
    saturation = SATURATION
    brightness = BRIGHTNESS

    def hues(self, n: int) -> np.ndarray:
        """The n hues i/n, for i in [0, n), in single precision.

        Raises
        ------
        InvalidColorCount
            If n is negative or is not an integer.
        """
        n = _check_count(n)

        if n == 0:
            return np.empty(0, dtype=np.float32)

        return np.arange(n).astype(np.float32) / np.float32(n)

    def sample(self, n: int) -> np.ndarray:
        hues = self.hues(n)

        if len(hues) == 0:
            return np.empty((0, 3), dtype=np.uint8)

        return hsb_to_rgb(hues, self.saturation, self.brightness)

    def hex_colors(self, n: int) -> list[str]:
        return [rgb_to_hex(rgb) for rgb in self.sample(n)]


def generate_distinct_colors(n: int) -> list[str]:
    """Generate n visually distinct colors.

    Parameters
    ----------
    n : int
        The number of colors to generate, which must be non-negative.

    Returns
    -------
    list of str
        The colors as '#rrggbb' strings, by ascending hue.

    Raises
    ------
    InvalidColorCount
        If n is negative or is not an integer.

    Examples
    --------
    >>> generate_distinct_colors(3)
    ['#e64545', '#45e645', '#4545e6']
    >>> generate_distinct_colors(0)
    []
    """
    colors = HueInterpolator().hex_colors(n)
    logger.debug("Generated %d distinct colors.", len(colors))
    return colors
