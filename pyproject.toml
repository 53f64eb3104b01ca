[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flowgrid"
version = "0.1.0"
description = "Grid layout, boundary filling, diagnostics and plots for a two-dimensional advection field, and a tiled five-point stencil"
requires-python = ">=3.10"
keywords = [
    "advection",
    "finite-difference",
    "stencil",
    "ghost-cells",
    "contour",
    "numerical-methods",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
flowgrid-stencil = "flowgrid.stencil:main"

[tool.hatch.build.targets.wheel]
packages = ["flowgrid"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
