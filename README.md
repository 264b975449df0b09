# raytrace

A small toolkit for 3D rendering experiments. It has four modules.

- `raytrace.mmath` holds the vector and matrix types.
  - Vectors: `Vec2`, `Vec3` and `Vec4` are immutable vectors with
    2, 3 and 4 components.
    - `+` and `-` work between vectors of the same kind.
    - `*` with a number scales a vector. `*` between two vectors of the
      same kind gives their dot product.
    - `/` divides a vector by a number.
    - Components can be read by index (`v[0]`). An index out of range
      raises `IndexError`. Vectors can also be unpacked by iteration.
    - `Vec3.xy()`, `Vec4.xy()` and `Vec4.xyz()` return the leading
      components.
  - Vector functions:
    - `norm` and `squared_norm` give the length and the squared length.
    - `normalized` returns a unit-length copy. A vector whose length is
      at most single-precision epsilon is returned unchanged.
    - `cwise_product` multiplies two vectors of the same kind component
      by component. Given anything else, it raises `TypeError`.
    - `cross` gives the cross product of two `Vec3`.
  - Matrices: `Matrix3` and `Matrix4` are square matrices stored row by
    row.
    - Build one from nested rows. With no argument you get a zero
      matrix. Rows of the wrong size raise `ValueError`.
    - `identity()` returns the identity matrix.
    - Rows can be read by index.
    - `*` gives a matrix product, or a matrix–vector product.
      `Matrix3 * Vec3` uses the whole matrix. `Matrix4 * Vec4` uses the
      whole matrix. `Matrix4 * Vec3` uses only the upper-left 3×3 block.
    - `Matrix4` also has `transpose()` and `inverse()`. `inverse()`
      returns the identity when the determinant is smaller than 1e-6.
- `raytrace.ray` defines `Ray`. A `Ray` is an immutable pair of `origin`
  and `direction`. `Ray.at(t)` gives `origin + t * direction`. The module
  also has `Color`, an alias of `Vec3`.
- `raytrace.progress` draws a text progress bar.
  - `progress_bar(progress, width=70)` returns a bar such as
    `[=====>    ] 50 %`.
  - `update_progress(progress, stream=None)` writes the bar followed by a
    carriage return, then flushes. It writes to standard output unless
    another stream is given.
- `raytrace.render` renders a gradient and writes plain-text PPM (P3).
  - `render_gradient(width=256, height=256, stream=None)` returns a
    row-major list of `Vec3` colours. When `stream` is given, it draws
    the progress bar on it. Sizes below 2 raise `ValueError`.
  - `format_ppm` returns the image as P3 text.
  - `write_ppm` saves the image to a file.
  - Both check that the pixel count matches `width * height`. If it
    does not, they raise `ValueError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
raytrace [--width W] [--height H] [-o OUTPUT]
```

The command renders a gradient.

- Image size: 256×256 unless `--width` and `--height` are given.
- Colours: red rises down the rows and green rises across the columns.
  Blue is 0.
- Progress: a progress bar is shown on standard output while it renders.
- Output: it prints the elapsed time, then writes the image to
  `output.ppm` unless `-o/--output` names another file.
- Errors: it exits with status 1 if the size is invalid or the file
  cannot be written.

## Library use

```python
from raytrace.mmath import Vec3, cross, normalized
from raytrace.ray import Ray

ray = Ray(Vec3(0.0, 0.0, 0.0), normalized(Vec3(1.0, 1.0, 0.0)))
point = ray.at(2.0)
up = cross(Vec3(1.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0))  # Vec3(0.0, 0.0, 1.0)
```

```python
from raytrace.render import render_gradient, write_ppm

pixels = render_gradient(64, 64)
write_ppm("gradient.ppm", pixels, 64, 64)
```

## What it does not do

There are no scenes, objects, cameras, materials or lighting. Nothing
intersects rays with geometry. The only image the package produces is the
colour gradient from `render_gradient`. The only output format is
plain-text PPM.