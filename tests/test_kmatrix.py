"""
Chew-Mandelstam loop function and the two-channel K-matrix.

The compiled grid kernel is compared point by point with the numpy version,
in the same way the batch and scalar modes of the other kernels are checked.
"""
import numpy as np
import pytest

from amplitudes import b1_kinematics
from model import PDG, ReactionKinematics
from pwa import TwoChannelKMatrix, chew_mandelstam, chew_mandelstam_grid


def test_chew_mandelstam_below_threshold_reference():
    G = chew_mandelstam(0.5, 0.5, 0.5)
    assert np.isclose(G.real, -0.5)
    assert np.isclose(G.imag, 0.0)


def test_chew_mandelstam_above_threshold_reference():
    """For m1 = m2 = 0.5 at s = 2: rho = 1/sqrt(2), |Im G| = rho."""
    rho = 1 / np.sqrt(2)
    G = chew_mandelstam(2.0, 0.5, 0.5)
    assert np.isclose(abs(G.imag), rho)
    assert np.isclose(G.real, -rho * np.log(3 + 2 * np.sqrt(2)) / np.pi)


def test_chew_mandelstam_approaches_zero_at_equal_mass_threshold():
    for eps in (1e-4, -1e-4):
        # |G| ~ rho ~ sqrt(|s - 4m^2|)
        assert abs(chew_mandelstam(1.0 + eps, 0.5, 0.5)) < 2 * np.sqrt(abs(eps))


def test_chew_mandelstam_imaginary_part_is_phase_space():
    """|Im G| = 2q/sqrt(s) above threshold for unequal masses."""
    m1, m2 = PDG.pion, PDG.proton
    for s in (1.5, 3.0, 10.0):
        q = np.sqrt((s - (m1 + m2) ** 2) * (s - (m2 - m1) ** 2)) / (2 * np.sqrt(s))
        assert np.isclose(abs(chew_mandelstam(s, m1, m2).imag), 2 * q / np.sqrt(s))


def test_chew_mandelstam_grid_matches_scalar():
    m1, m2 = PDG.pion, PDG.proton
    s_values = np.linspace(0.3, 12.0, 400)
    grid = chew_mandelstam_grid(s_values, m1, m2)
    scalar = np.array([chew_mandelstam(s, m1, m2) for s in s_values])
    assert grid.shape == s_values.shape
    assert np.allclose(grid.real, scalar.real)
    assert np.allclose(np.abs(grid.imag), np.abs(scalar.imag))

    vectorized = chew_mandelstam(s_values, m1, m2)
    assert np.allclose(vectorized, scalar)


@pytest.fixture
def kmatrix():
    amp = TwoChannelKMatrix(b1_kinematics(), 1, (PDG.pion, 1.232), identifier="P-wave")
    amp.set_params([0.4, 0.15, -0.2, 1.2, 0.7])
    return amp


def test_parameter_labels_and_count(kmatrix):
    assert kmatrix.parameter_labels() == ["a00[1]", "a01[1]", "a11[1]", "b0[1]", "b1[1]"]
    with pytest.raises(ValueError):
        kmatrix.set_params([1.0, 2.0])
    assert kmatrix.get_params() == [0.4, 0.15, -0.2, 1.2, 0.7]
    assert kmatrix.a01 == 0.15


def test_construction_rejects_unsupported_JP():
    kin = ReactionKinematics(PDG.omega)
    kin.set_meson_JP(2, +1)
    with pytest.raises(ValueError):
        TwoChannelKMatrix(kin, 0, (PDG.pion, PDG.proton))

    kin = ReactionKinematics(PDG.omega)
    kin.set_baryon_JP(3, +1)
    with pytest.raises(ValueError):
        TwoChannelKMatrix(kin, 0, (PDG.pion, PDG.proton))


def test_decoupled_channels(kmatrix):
    """a01 = 0: no cross term and the single-channel form A00 = K00/(1 - G0 K00)."""
    kmatrix.set_params([0.4, 0.0, -0.2, 1.2, 0.7])
    for s in (5.0, 8.0, 15.0):
        state = kmatrix.state(s)
        assert state.A01 == 0.0
        assert np.isclose(state.A00, state.K00 / (1 - state.G[0] * state.K00))
        single = state.B[0] * (1 + state.G[0] * state.K00 / (1 - state.G[0] * state.K00))
        assert np.isclose(kmatrix.evaluate(s), single)


def test_momentum_power_scaling(kmatrix):
    """Every K-matrix element carries one momentum product to the power J."""
    s = 9.0
    state = kmatrix.state(s)
    q0, q1 = state.q
    assert np.isclose(state.K00, q0 * q0 * 0.4)
    assert np.isclose(state.K01, q0 * q1 * 0.15)
    assert np.isclose(state.K11, q1 * q1 * -0.2)
    p = kmatrix.kinematics.initial_momentum(s)
    assert np.isclose(state.B[0], p * q0 * 1.2)


def test_evaluate_grid_matches_evaluate(kmatrix):
    s_values = np.linspace(kmatrix.kinematics.sth + 0.05, 20.0, 50)
    grid = kmatrix.evaluate_grid(s_values)
    scalar = np.array([kmatrix.evaluate(s) for s in s_values])
    assert np.allclose(grid.real, scalar.real)
    assert np.allclose(np.abs(grid.imag), np.abs(scalar.imag))


def test_helicity_projection(kmatrix):
    kin = kmatrix.kinematics
    s = 9.0
    t = kin.t_man(s, 0.0)
    leading = kmatrix.helicity_amplitude(kin.helicities(0), s, t)
    # P_1(1) = 1
    assert np.isclose(leading, np.sqrt(2) * 3 * kmatrix.evaluate(s))
    for h in kin.helicities()[1:]:
        assert kmatrix.helicity_amplitude(h, s, t) == 0
