"""
Entry point for evaluating sample observables.
Run from project root: python main.py
"""
import sys
from pathlib import Path

# Add src to path so imports work when run from project root (must be before imports from src)
sys.path.insert(0, str(Path(__file__).parent / "src"))


import numpy as np
from amplitudes import b1_kinematics, b1_pion_exchange
from inclusive import SigmaOption, TripleRegge
from model import PDG
from pwa import TwoChannelKMatrix
import time

if __name__ == "__main__":

    s = 75.9421

    # Exclusive b1 photoproduction
    exclusive = b1_pion_exchange(reggeized=True)
    t = exclusive.kinematics.t_min(s) - 0.1
    print(f"{exclusive.identifier}: dsigma/dt(s={s}, t={t:.3f}) = {exclusive.differential_xsection(s, t):.4e} nb/GeV^2")

    # Inclusive b1 in the high-energy approximation
    inclusive = TripleRegge(exclusive, use_tx=True)
    start_time = time.time()
    for x in (0.75, 0.85, 0.95):
        print(f"dsigma/dx(x={x}) = {inclusive.dsigma_dx(s, x) * 1e3:.4f} mub")
    end_time = time.time()
    print(f"Time taken: {end_time - start_time} seconds")

    inclusive.set_sigma_total(SigmaOption.DL_PIMP_ONLY_REGGE)
    print(f"with Donnachie-Landshoff sigma_tot: dsigma/dx(x=0.85) = {inclusive.dsigma_dx(s, 0.85) * 1e3:.4f} mub")

    # Two-channel S-wave b1 p / pi Delta-like rescattering
    kmatrix = TwoChannelKMatrix(b1_kinematics(), 0, (PDG.pion, 1.232), identifier="S-wave")
    kmatrix.set_params([0.5, 0.2, -0.3, 1.0, 0.5])
    s_grid = np.linspace(kmatrix.kinematics.sth + 0.1, 12.0, 5)
    for s_val, value in zip(s_grid, kmatrix.evaluate_grid(s_grid)):
        print(f"A(s={s_val:.3f}) = {value:.5f}")
