[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scopview"
version = "0.1.0"
description = "A small OpenGL viewer for Wavefront OBJ models with PPM textures"
requires-python = ">=3.10"
keywords = ["obj", "wavefront", "opengl", "viewer", "ppm", "3d"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Viewers",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
scopview = "scopview.viewer:main"

[tool.hatch.build.targets.wheel]
packages = ["scopview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
