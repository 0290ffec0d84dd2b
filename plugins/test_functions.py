#!/usr/bin/env python3
"""
Tests for the objective function library.

Verifies:
1. Known optima evaluate to their listed values
2. Lookup fails closed on unknown keys
3. value_range samples the inclusive (resolution+1)^2 grid
"""

import math
import numpy as np
from firefly_swarm.errors import UnknownFunctionKey, InvalidParameter
from firefly_swarm.functions import (
    FunctionKey, FUNCTION_ORDER, lookup, list_functions, value_range,
)


def test_known_optima():
    """Each built-in hits its listed optimum value."""
    print("Testing known optima...")
    assert lookup("sphere")(0.0, 0.0) == 0.0, "Sphere minimum should be exactly 0"
    assert lookup("rastrigin")(0.0, 0.0) == 0.0, "Rastrigin minimum should be exactly 0"
    assert lookup("rosenbrock")(1.0, 1.0) == 0.0, "Rosenbrock minimum should be exactly 0"

    himmelblau = lookup("himmelblau")
    assert himmelblau(3.0, 2.0) == 0.0, "Himmelblau (3, 2) should be exactly 0"
    for x, y, value in himmelblau.optima:
        assert abs(himmelblau(x, y) - value) < 1e-6, f"Himmelblau optimum off at ({x}, {y})"

    michalewicz = lookup("michalewicz")
    x, y, value = michalewicz.optima[0]
    assert abs(michalewicz(x, y) - value) < 0.01, \
        f"Michalewicz near (2.20, 1.57) should be ~-1.801: {michalewicz(x, y)}"
    print("  ✓ Known optima correct")


def test_formulas_off_optimum():
    """Spot-check formulas away from the minima."""
    print("Testing formulas...")
    assert lookup("sphere")(3.0, 4.0) == 25.0
    assert lookup("rosenbrock")(0.0, 0.0) == 1.0, "(1-0)^2 + 100*(0-0)^2 = 1"
    assert lookup("himmelblau")(0.0, 0.0) == 170.0, "(-11)^2 + (-7)^2 = 170"
    # cos(2*pi*0.5) = -1 on each axis: 20 + 2 * (0.25 + 10)
    assert abs(lookup("rastrigin")(0.5, 0.5) - 40.5) < 1e-9
    print("  ✓ Formulas correct")


def test_domains():
    """Domains match the published search ranges."""
    print("Testing domains...")
    d = lookup("michalewicz").domain
    assert (d.x_min, d.x_max, d.y_min, d.y_max) == (0.0, math.pi, 0.0, math.pi)
    d = lookup("rosenbrock").domain
    assert (d.x_min, d.x_max, d.y_min, d.y_max) == (-2.0, 2.0, -1.0, 3.0)
    assert d.width == 4.0 and d.height == 4.0
    assert lookup("rastrigin").domain.width == 10.24
    assert d.clamp(5.0, -7.0) == (2.0, -1.0), "Clamp should pin each axis"
    assert d.contains(0.0, 0.0) and not d.contains(0.0, 3.5)
    for key in FUNCTION_ORDER:
        assert lookup(key).minimize, f"{key} should be a minimization problem"
    print("  ✓ Domains correct")


def test_lookup():
    """Lookup takes strings or enum members and rejects everything else."""
    print("Testing lookup...")
    assert lookup(FunctionKey.sphere) is lookup("sphere")
    assert [k for k, _ in list_functions()] == [
        "michalewicz", "rastrigin", "rosenbrock", "himmelblau", "sphere"]

    for bad in ("ackley", "Sphere", "", None):
        try:
            lookup(bad)
        except UnknownFunctionKey as e:
            assert isinstance(e, ValueError), "UnknownFunctionKey should be a ValueError"
        else:
            raise AssertionError(f"lookup({bad!r}) should fail")
    print("  ✓ Lookup fails closed")


def test_vectorized_evaluation():
    """Functions evaluate whole grids as well as scalars."""
    print("Testing vectorized evaluation...")
    X, Y = np.meshgrid(np.linspace(-1, 1, 5), np.linspace(-1, 1, 4))
    Z = lookup("rastrigin")(X, Y)
    assert Z.shape == (4, 5), f"Grid evaluation shape wrong: {Z.shape}"
    assert abs(Z[0, 0] - lookup("rastrigin")(-1.0, -1.0)) < 1e-12
    print("  ✓ Vectorized evaluation working")


def test_value_range():
    """value_range uses the inclusive grid, boundaries included."""
    print("Testing value_range...")
    lo, hi = value_range("sphere", 50)
    assert abs(lo) < 1e-12, f"Sphere grid passes through the origin: {lo}"
    assert abs(hi - 50.0) < 1e-9, f"Sphere corners give 25 + 25: {hi}"

    # resolution 1 samples the four corners only
    assert value_range("sphere", 1) == (50.0, 50.0)
    # resolution 2 adds the edge midpoints and the centre
    assert value_range("sphere", 2) == (0.0, 50.0)

    assert value_range("himmelblau") == value_range("himmelblau", 50), "Default resolution is 50"
    assert value_range("rosenbrock", 40) == value_range(FunctionKey.rosenbrock, 40)

    for bad in (0, -3, 2.5):
        try:
            value_range("sphere", bad)
        except InvalidParameter:
            pass
        else:
            raise AssertionError(f"resolution {bad!r} should be rejected")
    print("  ✓ value_range working correctly")


if __name__ == "__main__":
    print("\n=== Testing Objective Functions ===\n")

    test_known_optima()
    test_formulas_off_optimum()
    test_domains()
    test_lookup()
    test_vectorized_evaluation()
    test_value_range()

    print("\n✓ All tests passed!\n")
