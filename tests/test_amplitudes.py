"""
Exclusive amplitude interface: configuration errors, quantum-number tables,
propagators and the pion-exchange reference amplitude.
"""
import numpy as np
import pytest

from amplitudes import (
    AXIAL_VECTOR,
    G_B1,
    G_NN,
    PseudoscalarExchange,
    b1_kinematics,
    b1_pion_exchange,
    fixed_spin_propagator,
    pion_trajectory,
    regge_propagator,
    resonance_quantum_numbers,
    signature_factor,
)
from model import PDG, LinearTrajectory, ReactionKinematics


def test_wrong_meson_JP_is_rejected():
    # default kinematics describe a vector meson
    kin = ReactionKinematics(PDG.b1)
    with pytest.raises(ValueError):
        PseudoscalarExchange(kin, PDG.pion)


def test_wrong_baryon_JP_is_rejected():
    kin = b1_kinematics()
    kin.set_baryon_JP(3, -1)
    with pytest.raises(ValueError):
        PseudoscalarExchange(kin, PDG.pion)


def test_parameter_count_is_checked_before_assignment():
    amp = PseudoscalarExchange(b1_kinematics(), PDG.pion)
    amp.set_params([G_B1, G_NN])
    with pytest.raises(ValueError):
        amp.set_params([1.0, 2.0, 3.0])
    assert amp.get_params() == [G_B1, G_NN]
    assert amp.g_top == G_B1
    assert amp.g_bottom == G_NN
    assert amp.parameter_labels() == ["g_top", "g_bottom"]


def test_resonance_table_is_exhaustive():
    expected = {
        (1, +1): (0, 2 / 3),
        (1, -1): (1, 3 / 5),
        (3, +1): (1, 3 / 5),
        (3, -1): (0, 2 / 3),
        (5, +1): (1, 3 / 5),
        (5, -1): (2, 1 / 3),
    }
    for (j2, parity), (l_min, factor) in expected.items():
        got_l, got_factor = resonance_quantum_numbers(j2, parity)
        assert got_l == l_min
        assert np.isclose(got_factor, factor)


@pytest.mark.parametrize("j2, parity", [(7, +1), (2, +1), (1, 0), (3, 2)])
def test_unlisted_resonance_raises(j2, parity):
    with pytest.raises(ValueError):
        resonance_quantum_numbers(j2, parity)


def test_signature_factor():
    assert np.isclose(signature_factor(+1, 0.0), 1.0)
    assert np.isclose(signature_factor(-1, 0.0), 0.0)
    assert np.isclose(signature_factor(-1, 1.0), 1.0)


@pytest.mark.parametrize("J, signature", [(0, +1), (1, -1), (2, +1)])
def test_regge_propagator_reduces_to_pole(J, signature):
    """alpha(t) = J + alpha'(t - m^2) with alpha' -> 0 gives 1/(m^2 - t)."""
    m2 = 0.6
    alpha_prime = 1e-7
    trajectory = LinearTrajectory(signature, J - alpha_prime * m2, alpha_prime, min_J=J)
    s = 20.0
    for t in (-0.1, -0.5, -1.5):
        regge = regge_propagator(trajectory, s, t)
        assert np.isclose(regge, fixed_spin_propagator(m2, t), rtol=1e-4)


def test_pion_trajectory_has_pole_at_pion_mass():
    alpha = pion_trajectory()
    assert np.isclose(alpha.eval(PDG.pion**2), 0.0)
    assert alpha.signature == +1


def test_helicity_amplitudes_are_parity_symmetric():
    """|A(l)| = |A(-l)| with every helicity flipped."""
    amp = b1_pion_exchange(reggeized=False)
    s = 20.0
    t = amp.kinematics.t_min(s) - 0.3
    for h in amp.kinematics.helicities():
        flipped = tuple(-x for x in h)
        assert np.isclose(
            abs(amp.helicity_amplitude(h, s, t)),
            abs(amp.helicity_amplitude(flipped, s, t)),
        )


def test_cross_sections():
    amp = b1_pion_exchange(reggeized=True)
    kin = amp.kinematics
    s = 20.0
    t = kin.t_min(s) - 0.2
    assert amp.probability_distribution(s, t) > 0.0
    assert amp.differential_xsection(s, t) > 0.0
    assert amp.integrated_xsection(0.9 * kin.sth) == 0.0
    assert amp.integrated_xsection(s) > 0.0


def test_form_factor_suppresses_large_t():
    amp = b1_pion_exchange(reggeized=False)
    s = 20.0
    t = amp.kinematics.t_min(s) - 1.0
    with_ff = amp.differential_xsection(s, t)
    amp.set_formfactor(False)
    without_ff = amp.differential_xsection(s, t)
    assert with_ff < without_ff
    assert AXIAL_VECTOR in amp.allowed_meson_JP()
