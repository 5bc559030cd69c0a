"""
Partial-wave amplitudes unitarized with the K-matrix.

    chew_mandelstam       complex two-body loop function
    chew_mandelstam_grid  compiled batch evaluation of the same
    TwoChannelKMatrix     two coupled channels in the scattering-length approximation
"""

from .chew_mandelstam import chew_mandelstam, chew_mandelstam_grid
from .two_channel import KMatrixState, TwoChannelKMatrix

__all__ = [
    "chew_mandelstam",
    "chew_mandelstam_grid",
    "KMatrixState",
    "TwoChannelKMatrix",
]
