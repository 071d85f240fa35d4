#!/usr/bin/env python
"""Grid function demo.

This demo discretizes f(x0, x1) = x0 * log(x1) on [1, 1000] x [1, 1000] with 10 axis intervals
along both coordinates on three differently spaced grids:

1) x0 linear, x1 linear, given as a plain function;
2) x0 linear, x1 logarithmic, given as a callable object;
3) x0 logarithmic, x1 logarithmic, given as a bound method.

For each grid it prints the coordinates and the value at the grid point (2, 7), the interpolated
value at the coordinates (30, 650) and the estimated integral over the whole grid. As f is linear
in x0 and logarithmic in x1, the interpolation on the lin-log grid is exact.
"""

import math
from pathlib import Path

from matplotlib import pyplot as plt

from multidimgrid import GridFunction, LinearCoordinateAxis, LogarithmicCoordinateAxis

plt.ion()


def function(x):
    return x[0] * math.log(x[1])


class CallableFunction:
    def __call__(self, x):
        return x[0] * math.log(x[1])


class Model:
    def evaluate(self, x):
        return x[0] * math.log(x[1])


demos_path = Path(__file__).parent
plots_path = demos_path / "plots"
plots_path.mkdir(exist_ok=True)

lin_axis = LinearCoordinateAxis(1.0, 1000.0, 10)
log_axis = LogarithmicCoordinateAxis(1.0, 1000.0, 10)

grid_functions = {
    "lin-lin": GridFunction([lin_axis, lin_axis], function),
    "lin-log": GridFunction([lin_axis, log_axis], CallableFunction()),
    "log-log": GridFunction([log_axis, log_axis], Model().evaluate),
}

grid_point = (2, 7)
coords = (30.0, 650.0)

# Exact integral of x0 * ln(x1) over [1, 1000]^2
exact_integral = 0.5 * (1000.0**2 - 1.0) * (1000.0 * math.log(1000.0) - 1000.0 + 1.0)

for name, func in grid_functions.items():
    y = func.coordinates(grid_point)
    print(
        f"{name}: grid point {grid_point} has the coordinates ({y[0]:e}, {y[1]:e}) "
        + f"and the value {func[grid_point]:e}."
    )

print()
for name, func in grid_functions.items():
    print(f"{name}: interpolated value at {coords} is {func(*coords):e}.")
print(f"exact value at {coords} is {function(coords):e}.")

print()
for name, func in grid_functions.items():
    print(f"{name}: estimated integral is {func.integrate():e}.")
print(f"exact integral is {exact_integral:e}.")

for name, func in grid_functions.items():
    ax = func.plot()
    ax.set_title(name)
    ax.figure.savefig(plots_path / f"{name}.png", dpi=200)

plt.ioff()
plt.show()
