[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sketchbook"
version = "0.1.0"
description = "Small generative and interactive drawing sketches that run in a pygame window"
requires-python = ">=3.10"
keywords = ["generative art", "creative coding", "sketches", "animation", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Artistic Software",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pygame",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sketchbook = "sketchbook.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sketchbook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
