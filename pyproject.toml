[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jakoscpowietrza"
version = "1.0.0"
description = "Desktop browser for air-quality stations, sensors and measurements, with a local JSON cache and charts."
requires-python = ">=3.10"
keywords = ["air quality", "pollution", "measurements", "chart", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Science/Research",
    "Natural Language :: Polish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Atmospheric Science",
]
dependencies = [
    "requests>=2.28",
    "matplotlib>=3.6",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[project.scripts]
jakoscpowietrza = "jakoscpowietrza.app:main"

[tool.hatch.build.targets.wheel]
packages = ["jakoscpowietrza"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
