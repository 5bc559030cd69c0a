import numpy as np
import matplotlib.pyplot as plt
from pathlib import Path

# Omega-Photon b1 data at s = 75.9421 GeV^2
DATA_X = np.array([0.65, 0.75, 0.85, 0.95])
DATA_X_ERR = np.array([0.05, 0.05, 0.05, 0.05])
DATA_SIGMA = np.array([1.80957, 2.15690, 1.3661, 0.65901])
DATA_SIGMA_ERR = np.array([2.36188 - 1.80957, 2.47490 - 2.15690, 1.53345 - 1.36611, 0.76779 - 0.65901])


def plot_dsigma_dx(x_grid, curves, show_data=True, save_plots=False, filename="dsigmadx.pdf", figsize=(7, 5)):
    """
    Plot dsigma/dx curves in mub.

    Parameters:
    -----------
    x_grid : array-like
        1D array of x values
    curves : dict
        label -> (values, linestyle); values share the shape of x_grid
    show_data : bool
        Overlay the Omega-Photon points (default: True)
    save_plots : bool
        Whether to save the plot to `plots/<filename>` (default: False)
    """
    fig, ax = plt.subplots(figsize=figsize)

    for label, (values, linestyle) in curves.items():
        ax.plot(x_grid, values, linestyle=linestyle, label=label)

    if show_data:
        ax.errorbar(DATA_X, DATA_SIGMA, xerr=DATA_X_ERR, yerr=DATA_SIGMA_ERR,
                    fmt='o', color='k', label='Omega Photon')

    ax.set_xlabel('$x$', fontsize=12)
    ax.set_ylabel('$d\\sigma/dx$  [$\\mu$b]', fontsize=12)
    ax.set_xlim(np.min(x_grid), np.max(x_grid))
    ax.set_ylim(bottom=0.0)
    ax.legend()
    ax.grid(True, alpha=0.3)
    plt.tight_layout()

    if save_plots:
        output = Path(__file__).parent / filename
        fig.savefig(output, dpi=150, bbox_inches='tight')
        print(f"Saved plot to {output}")

    plt.show()
    return fig, ax
