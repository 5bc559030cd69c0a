"""
Default couplings and exchanges for b1(1235) photoproduction through pion exchange.

Keeping these in one place lets scripts and tests build the same amplitudes.
"""

from __future__ import annotations

import math

from model import PDG, LinearTrajectory, ReactionKinematics

from .pseudoscalar_exchange import PseudoscalarExchange

# gamma pi b1 coupling
G_B1 = 0.24

# pi N N coupling, same for every charged-pion vertex
G_NN = math.sqrt(2.0) * math.sqrt(4.0 * math.pi * 13.81)

# 900 MeV cutoff of the exponential pion form factor
LAMBDA_PION = 0.9
B_PION = 1.0 / LAMBDA_PION**2

PION_SLOPE = 0.7


def pion_trajectory():
    trajectory = LinearTrajectory(+1, -PION_SLOPE * PDG.pion**2, PION_SLOPE, name="pion")
    trajectory.set_minJ(0)
    return trajectory


def b1_kinematics():
    kinematics = ReactionKinematics(PDG.b1)
    kinematics.set_meson_JP(1, +1)
    return kinematics


def b1_pion_exchange(reggeized=True, identifier=None):
    """b1 photoproduction through a Reggeized or fixed-spin pion."""
    exchange = pion_trajectory() if reggeized else PDG.pion
    if identifier is None:
        identifier = "Reggeized pi" if reggeized else "Fixed-spin pi"
    amplitude = PseudoscalarExchange(b1_kinematics(), exchange, identifier)
    amplitude.set_params([G_B1, G_NN])
    amplitude.set_formfactor(True, B_PION)
    return amplitude


__all__ = [
    "G_B1",
    "G_NN",
    "LAMBDA_PION",
    "B_PION",
    "PION_SLOPE",
    "pion_trajectory",
    "b1_kinematics",
    "b1_pion_exchange",
]
