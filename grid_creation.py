import numpy as np
import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from amplitudes import b1_pion_exchange
from inclusive import SigmaOption, TripleRegge, parallel_xsection_grid
from plots.plot_dsigma_dx import plot_dsigma_dx


def dsigma_dx_grids(s, n_points, n_jobs, options=(SigmaOption.PDG_PIMP_ONLY_REGGE, SigmaOption.DL_PIMP_ONLY_REGGE)):
    """dsigma/dx in mub for the Reggeized and fixed-spin pion, one grid per sigma_tot option."""
    x_grid = np.linspace(0.7, 1.0, n_points)
    grids = {}
    for reggeized in (True, False):
        model = TripleRegge(b1_pion_exchange(reggeized=reggeized), use_tx=True)
        for option in options:
            model.set_sigma_total(option)
            key = f"{'regge' if reggeized else 'fixed'}_{option.value}"
            grids[key] = 1e3 * parallel_xsection_grid(model, "dsigma_dx", s, x_grid, n_jobs=n_jobs, verbose=3)
    return x_grid, grids


if __name__ == "__main__":

    s = 75.9421
    x, grids = dsigma_dx_grids(s, n_points=200, n_jobs=8)
    Path("data").mkdir(exist_ok=True)
    np.savez("data/b1_dsigma_dx.npz", x=x, s=s, **grids)

    curves = {}
    for key, values in grids.items():
        exchange, option = key.split("_", 1)
        label = ("Reggeized $\\pi^-$" if exchange == "regge" else "Fixed-spin $\\pi^-$") + f" ({option})"
        curves[label] = (values, '-' if option.startswith("pdg") else '--')
    plot_dsigma_dx(x, curves, save_plots=True)
