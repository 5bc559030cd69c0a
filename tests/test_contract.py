"""
Lorentz tensor and Dirac algebra through the single `contract` entry point.

Random components come from a seeded generator so failures are reproducible.
"""
import numpy as np
import pytest

from lorentz import (
    GAMMA,
    GAMMA_0,
    GAMMA_5,
    IDENTITY,
    DiracMatrix,
    DiracSpinor,
    ElementKind,
    LorentzTensor,
    contract,
    four_vector,
    gamma_vector,
    helicity_spinor,
    metric,
    metric_tensor,
    outer,
    permutations,
    scalar,
    slash,
)

G = np.diag([1.0, -1.0, -1.0, -1.0])


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


def _random_vector(rng):
    return rng.normal(size=4) + 1j * rng.normal(size=4)


def test_permutations_cover_all_index_tuples():
    assert permutations(0) == ((),)
    assert len(permutations(1)) == 4
    assert len(permutations(2)) == 16
    assert len(set(permutations(2))) == 16
    with pytest.raises(ValueError):
        permutations(3)


def test_metric_sign_and_products():
    assert metric(0) == 1
    assert all(metric(mu) == -1 for mu in (1, 2, 3))
    assert metric((0, 0)) == 1
    assert metric((1, 2)) == 1
    assert metric((0, 3)) == -1


def test_rank1_contraction_is_minkowski_product(rng):
    """contract(A, B) = A0 B0 - A1 B1 - A2 B2 - A3 B3."""
    for _ in range(20):
        a, b = _random_vector(rng), _random_vector(rng)
        by_hand = a[0] * b[0] - a[1] * b[1] - a[2] * b[2] - a[3] * b[3]
        assert np.isclose(contract(four_vector(a), four_vector(b)), by_hand)


def test_contraction_is_symmetric(rng):
    a, b = four_vector(_random_vector(rng)), four_vector(_random_vector(rng))
    assert np.isclose(contract(a, b), contract(b, a))

    A = outer(a, b)
    B = outer(four_vector(_random_vector(rng)), a)
    assert np.isclose(contract(A, B), contract(B, A))


def test_rank2_contraction_factorizes(rng):
    """(a outer b) . (c outer d) = (a.c)(b.d)."""
    a, b, c, d = (four_vector(_random_vector(rng)) for _ in range(4))
    assert np.isclose(contract(outer(a, b), outer(c, d)), contract(a, c) * contract(b, d))


def test_metric_tensor_trace():
    # g^{mu nu} g_{mu nu} = 4
    assert np.isclose(contract(metric_tensor(), metric_tensor()), 4.0)


def test_rank0_contraction_is_product():
    assert np.isclose(contract(scalar(2.0 + 1j), scalar(3.0)), 6.0 + 3j)
    assert contract(2.0, 3.0) == 6.0


def test_rank_mismatch_raises(rng):
    a = four_vector(_random_vector(rng))
    with pytest.raises(ValueError):
        contract(a, outer(a, a))


def test_unsupported_pair_raises():
    u = helicity_spinor(0.938, 1.5, 0.3, 1)
    with pytest.raises(TypeError):
        contract(u, GAMMA_0)
    with pytest.raises(TypeError):
        contract(u, 2.0)


def test_gamma_matrices_anticommute():
    """{gamma^mu, gamma^nu} = 2 g^{mu nu} through the matrix-matrix rule."""
    for mu in range(4):
        for nu in range(4):
            anti = contract(GAMMA[mu], GAMMA[nu]) + contract(GAMMA[nu], GAMMA[mu])
            assert np.allclose(anti.components, 2 * G[mu, nu] * np.identity(4))


def test_gamma5_anticommutes_and_squares_to_one():
    assert np.allclose((GAMMA_5 * GAMMA_5).components, IDENTITY.components)
    for g in GAMMA:
        assert np.allclose((GAMMA_5 * g + g * GAMMA_5).components, 0.0)


def test_slash_squared_is_p2(rng):
    """p-slash p-slash = p^2 times the identity."""
    p = four_vector(rng.normal(size=4))
    p_slash = slash(p)
    assert isinstance(p_slash, DiracMatrix)
    p2 = contract(p, p)
    assert np.allclose((p_slash * p_slash).components, p2 * np.identity(4))


def test_gamma_vector_is_matrix_valued():
    gamma = gamma_vector()
    assert gamma.element_kind is ElementKind.MATRIX
    assert np.allclose(gamma(2).components, GAMMA[2].components)
    assert np.allclose(gamma((3,)).components, GAMMA[3].components)


def test_spinor_normalization():
    """u-bar u = 2m for both helicities at any angle."""
    mass, energy = 0.938272, 2.3
    for theta in (0.0, 0.4, np.pi):
        for lam2 in (1, -1):
            u = helicity_spinor(mass, energy, theta, lam2)
            assert np.isclose(contract(u, u), 2 * mass)


def test_bilinear_accepts_adjoint_on_left(rng):
    u = DiracSpinor(_random_vector(rng))
    v = DiracSpinor(_random_vector(rng))
    by_hand = np.conj(u.components) @ GAMMA_0.components @ v.components
    assert np.isclose(contract(u, v), by_hand)
    assert np.isclose(contract(u.bar(), v), by_hand)
    with pytest.raises(ValueError):
        contract(u, v.bar())


def test_spinor_equation_of_motion():
    """(p-slash - m) u = 0 for an on-shell helicity spinor."""
    mass, energy, theta = 0.938272, 1.7, 0.8
    p = np.sqrt(energy**2 - mass**2)
    momentum = four_vector([energy, p * np.sin(theta), 0.0, p * np.cos(theta)])
    u = helicity_spinor(mass, energy, theta, -1)
    residual = (slash(momentum) - mass * IDENTITY) * u
    assert np.allclose(residual.components, 0.0)


def test_matrix_valued_tensor_contraction(rng):
    """gamma^mu gamma_mu = 4 through the tensor rule with matrix elements."""
    gamma = gamma_vector()
    result = contract(gamma, gamma)
    assert np.allclose(result.components, 4 * np.identity(4))


def test_tensors_are_read_only(rng):
    a = four_vector(_random_vector(rng))
    with pytest.raises(ValueError):
        a.components[0] = 1.0
    with pytest.raises(ValueError):
        GAMMA_0.components[0, 0] = 2.0


def test_tensor_shape_is_checked():
    with pytest.raises(ValueError):
        LorentzTensor(np.zeros(3), 1)
    with pytest.raises(ValueError):
        LorentzTensor(np.zeros((4, 4)), 1, element_kind=ElementKind.MATRIX)


def test_adding_mismatched_tensors_raises(rng):
    a = four_vector(_random_vector(rng))
    with pytest.raises(ValueError):
        a + outer(a, a)
