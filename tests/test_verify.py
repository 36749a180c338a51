from core.solver import InfiniteSolutions, NoSolution, OneRealRoot, TwoComplexRoots, TwoRealRoots
from core.verify import check_solution


def test_real_roots_check_out():
    assert check_solution((1.0, 0.0, -4.0), TwoRealRoots(2.0, -2.0)) is True
    assert check_solution((1.0, -4.0, 4.0), OneRealRoot(2.0)) is True
    assert check_solution((0.0, 2.0, -4.0), OneRealRoot(2.0, degree=1)) is True


def test_wrong_root_fails():
    assert check_solution((1.0, 0.0, -4.0), TwoRealRoots(3.0, -2.0)) is False


def test_complex_roots_check_out():
    assert check_solution((1.0, 0.0, 1.0), TwoComplexRoots(0.0, 1.0)) is True
    assert check_solution((1.0, 2.0, 5.0), TwoComplexRoots(-1.0, 2.0), "z") is True
    assert check_solution((1.0, 2.0, 5.0), TwoComplexRoots(-1.0, 3.0)) is False


def test_large_roots_use_relative_tolerance():
    # (x - 1e6)(x - 1)
    assert check_solution((1.0, -1000001.0, 1e6), TwoRealRoots(1e6, 1.0)) is True


def test_results_without_roots():
    assert check_solution((0.0, 0.0, 0.0), InfiniteSolutions()) is None
    assert check_solution((0.0, 0.0, 1.0), NoSolution()) is None


def test_non_finite_roots_never_check_out():
    inf = float("inf")
    assert check_solution((1.0, 1e200, 1.0), TwoRealRoots(inf, -inf)) is False
    assert check_solution((1.0, 0.0, 1.0), TwoComplexRoots(float("nan"), 1.0)) is False
    assert check_solution((0.0, 1e-8, 1e308), OneRealRoot(-inf, degree=1)) is False
