"""
Objective Functions for the Firefly Swarm

Each entry defines a 2-D scalar landscape, its rectangular search domain
and its known optima. All built-ins are minimization problems: lower
values are brighter fireflies.

Functions are written with numpy ufuncs so they accept plain floats
(agent evaluation) as well as whole coordinate grids (range sampling,
landscape plotting).
"""

import enum
import numpy as np

from .errors import UnknownFunctionKey, InvalidParameter


class FunctionKey(str, enum.Enum):
    """The built-in objective functions. Lookup fails closed on anything else."""
    michalewicz = "michalewicz"
    rastrigin = "rastrigin"
    rosenbrock = "rosenbrock"
    himmelblau = "himmelblau"
    sphere = "sphere"


class Domain:
    """Rectangular search bounds [x_min, x_max] x [y_min, y_max]."""

    def __init__(self, x_min, x_max, y_min, y_max):
        self.x_min = float(x_min)
        self.x_max = float(x_max)
        self.y_min = float(y_min)
        self.y_max = float(y_max)

    @property
    def width(self):
        return self.x_max - self.x_min

    @property
    def height(self):
        return self.y_max - self.y_min

    def contains(self, x, y):
        return self.x_min <= x <= self.x_max and self.y_min <= y <= self.y_max

    def clamp(self, x, y):
        """Clamp a point into the domain, axis by axis."""
        x = max(self.x_min, min(self.x_max, x))
        y = max(self.y_min, min(self.y_max, y))
        return x, y

    def __eq__(self, other):
        if not isinstance(other, Domain):
            return NotImplemented
        return (self.x_min, self.x_max, self.y_min, self.y_max) == \
            (other.x_min, other.x_max, other.y_min, other.y_max)

    def __repr__(self):
        return (f"Domain(x=[{self.x_min}, {self.x_max}], "
                f"y=[{self.y_min}, {self.y_max}])")


class ObjectiveFunction:
    """A named landscape: pure fn(x, y), domain and known optima."""

    def __init__(self, key, name, fn, domain, optima, minimize=True):
        self.key = key
        self.name = name
        self.fn = fn
        self.domain = domain
        self.optima = list(optima)
        self.minimize = minimize

    def __call__(self, x, y):
        return self.fn(x, y)

    def __repr__(self):
        return f"ObjectiveFunction({self.key.value!r})"


def _michalewicz(x, y, m=10):
    term1 = np.sin(x) * np.sin((x * x) / np.pi) ** (2 * m)
    term2 = np.sin(y) * np.sin((2 * y * y) / np.pi) ** (2 * m)
    return -(term1 + term2)


def _rastrigin(x, y, A=10):
    return (A * 2 + (x * x - A * np.cos(2 * np.pi * x)) +
            (y * y - A * np.cos(2 * np.pi * y)))


def _rosenbrock(x, y, a=1, b=100):
    return (a - x) ** 2 + b * (y - x * x) ** 2


def _himmelblau(x, y):
    return (x * x + y - 11) ** 2 + (x + y * y - 7) ** 2


def _sphere(x, y):
    return x * x + y * y


FUNCTIONS = {
    FunctionKey.michalewicz: ObjectiveFunction(
        FunctionKey.michalewicz, "Michalewicz", _michalewicz,
        Domain(0, np.pi, 0, np.pi),
        optima=[(2.20, 1.57, -1.801)],
    ),
    FunctionKey.rastrigin: ObjectiveFunction(
        FunctionKey.rastrigin, "Rastrigin", _rastrigin,
        Domain(-5.12, 5.12, -5.12, 5.12),
        optima=[(0.0, 0.0, 0.0)],
    ),
    FunctionKey.rosenbrock: ObjectiveFunction(
        FunctionKey.rosenbrock, "Rosenbrock", _rosenbrock,
        Domain(-2, 2, -1, 3),
        optima=[(1.0, 1.0, 0.0)],
    ),
    FunctionKey.himmelblau: ObjectiveFunction(
        FunctionKey.himmelblau, "Himmelblau", _himmelblau,
        Domain(-5, 5, -5, 5),
        optima=[
            (3.0, 2.0, 0.0),
            (-2.805118, 3.131312, 0.0),
            (-3.779310, -3.283186, 0.0),
            (3.584428, -1.848126, 0.0),
        ],
    ),
    FunctionKey.sphere: ObjectiveFunction(
        FunctionKey.sphere, "Sphere", _sphere,
        Domain(-5, 5, -5, 5),
        optima=[(0.0, 0.0, 0.0)],
    ),
}

# Display order for function pickers
FUNCTION_ORDER = [
    FunctionKey.michalewicz,
    FunctionKey.rastrigin,
    FunctionKey.rosenbrock,
    FunctionKey.himmelblau,
    FunctionKey.sphere,
]


def to_key(key):
    """Coerce a string or FunctionKey to FunctionKey. Raises UnknownFunctionKey."""
    if isinstance(key, FunctionKey):
        return key
    try:
        return FunctionKey(key)
    except ValueError:
        raise UnknownFunctionKey(key, [k.value for k in FUNCTION_ORDER]) from None


def lookup(key):
    """Get the ObjectiveFunction registered under key."""
    return FUNCTIONS[to_key(key)]


def list_functions():
    """Return list of (key, name) for all built-in functions."""
    return [(k.value, FUNCTIONS[k].name) for k in FUNCTION_ORDER]


def value_range(key, resolution=50):
    """Min and max of a function sampled on its domain.

    Samples a (resolution+1) x (resolution+1) grid that includes both
    domain boundaries, at x_min + i*dx and y_min + j*dy. Renderers use the
    result to normalize landscape colors, so the grid must stay exactly
    this one.

    Returns:
        Tuple of (min, max)
    """
    if int(resolution) != resolution or resolution < 1:
        raise InvalidParameter(
            f"resolution must be a positive integer, got {resolution!r}")
    func = lookup(key)
    d = func.domain
    resolution = int(resolution)

    dx = d.width / resolution
    dy = d.height / resolution
    steps = np.arange(resolution + 1)
    xs = d.x_min + steps * dx
    ys = d.y_min + steps * dy
    X, Y = np.meshgrid(xs, ys, indexing="ij")
    values = func(X, Y)
    return float(values.min()), float(values.max())
