# formulakit

A small library of the formulas met in secondary-school mathematics. Each one
is a plain Python function that checks its inputs and raises an exception when
they make no sense. It has no dependencies beyond the standard library.

## What is inside

| Module | Contents |
| --- | --- |
| `formulakit.complex_numbers` | `Complex` with `add`, `multiply`, `divide`, `conjugate`, `modulus` |
| `formulakit.algebra` | `cubic_difference`, `subset_count`, `mean_inequalities`, `cauchy_equality`, `check_log_validity`, `log`, `average_growth_rate` |
| `formulakit.statistics` | `percentile`, `sample_mean`, `sample_variance` |
| `formulakit.vector` | `Vector` with `magnitude`, plus `are_collinear`, `dot_product`, `cos_angle`, `cross_product` |
| `formulakit.solid` | `cylinder_surface_area`, `frustum_volume`, `sphere_surface_area`, `sphere_volume`, `euler_characteristic`, `is_valid_dimensions` |
| `formulakit.space` | `Vec3`, `Plane` and the theorems on lines and planes in space |
| `formulakit.triangle` | `Vector2D`, `Triangle`, laws of sines and cosines, projection theorem, median length, Heron's formula, centroid, incenter, circumcenter, orthocenter, `distance` |
| `formulakit.trig` | sine, cosine, tangent, degree/radian conversion, sum, difference, double- and half-angle identities, sum-to-product and product-to-sum, auxiliary angle, period |
| `formulakit.closures` | `make_counter`, `announce_and_call`, `demo` |
| `formulakit.methods` | `Person`, `greeting_of`, `age_counter`, `demo` |

## Examples

```python
from formulakit.algebra import mean_inequalities
from formulakit.triangle import heron_formula
from formulakit.trig import deg_to_rad, period

harmonic, geometric, arithmetic, quadratic = mean_inequalities([1.0, 2.0, 4.0])
assert harmonic <= geometric <= arithmetic <= quadratic

area = heron_formula(3, 4, 5)        # 6.0
right_angle = deg_to_rad(90)         # pi / 2
full_turn = period(1.0)              # 2 * pi
```

Geometry in space works with `Vec3` and `Plane`:

```python
from formulakit.space import Plane, Vec3, ZeroVectorError, is_line_perpendicular_to_plane

floor = Plane.from_points(Vec3(0, 0, 0), Vec3(1, 0, 0), Vec3(0, 1, 0))
is_line_perpendicular_to_plane(Vec3(0, 0, 2), floor)   # True

try:
    Vec3(0, 0, 0).normalize()
except ZeroVectorError:
    print("a zero vector has no direction")
```

`ZeroVectorError`, `NotPerpendicularError`, `NotCoplanarError`,
`NotParallelError` and `InvalidParameterError` are all subclasses of
`ValueError`.

## Errors

Functions that cannot give a result for their arguments raise rather than
return a placeholder value:

- `ValueError` for a logarithm with base 1 or a non-positive argument, an empty
  or non-positive set in `mean_inequalities`, a negative dimension of a solid,
  sides that break the triangle inequality, a sine or cosine value outside
  [-1, 1], a tangent where the cosine is zero, a zero `omega` in `period`, or a
  negative rank in `percentile`;
- `ZeroDivisionError` from `complex_numbers.divide` when the divisor is zero or
  very close to it;
- `IndexError` from `percentile` when the computed position falls outside the
  data.

## Some conventions

- `percentile(p, data)` sorts the data and takes `i = n * p / 100`. When `i` is
  whole it returns the mean of the sorted values at zero-based positions `i`
  and `i + 1`; otherwise it returns the value at `floor(i) + 1`.
- `sample_variance` is the population variance: the mean of the squares minus
  the square of the mean.
- `euler_characteristic(v, e, f)` treats a zero among `v`, `e`, `f` (checked in
  that order) as the unknown of `V - E + F = 2` and returns it; when none is
  zero it checks the triple and returns 0.
- The product-to-sum functions in `trig` (`sin_cos_to_sum`, `sin_sin_to_sum`,
  `cos_cos_to_sum`) return the two terms whose sum is the product.
- `Person.greeting` leaves the name unchanged, while `Person.greet_in_place`
  prefixes the stored name. `age_counter` closes over a copy of the person, so
  each counter ages its own copy.

## Demonstrations

`formulakit.closures.demo()` and `formulakit.methods.demo()` print short
demonstrations of closures that keep their own state and of methods called
bound or unbound. The closures demo writes its announcements to standard error
and its counter values to standard output.

## What it does not do

This is a library only: it installs no command-line program, and the
demonstrations are run by calling their `demo()` functions from Python.

## Running the tests

The test suite uses pytest, available through the `test` extra:

```
pip install .[test]
pytest
```