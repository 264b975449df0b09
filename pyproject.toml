[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raytrace"
version = "0.1.0"
description = "Small vector and matrix toolkit with a gradient renderer that writes PPM images"
requires-python = ">=3.10"
dependencies = []
keywords = ["rendering", "vector", "matrix", "ray", "ppm", "progress bar"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
raytrace = "raytrace.render:main"

[tool.hatch.build.targets.wheel]
packages = ["raytrace"]

[tool.pytest.ini_options]
addopts = "-ra"
