[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gba3d"
version = "0.1.0"
description = "Fixed-point software rasterizer for 16-bit bitmap framebuffers shaped like a handheld's 240x160 display modes"
requires-python = ">=3.10"
dependencies = []
keywords = ["rasterizer", "fixed-point", "software-rendering", "3d", "triangle", "framebuffer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gba3d-triangle = "gba3d.triangle:main"

[tool.hatch.build.targets.wheel]
packages = ["gba3d"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
