[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smplterm"
version = "1.0.0"
description = "A small interactive command console for a sampler, with PCM device listing"
requires-python = ">=3.10"
dependencies = []
keywords = ["sampler", "terminal", "console", "alsa", "pcm", "audio"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
smplterm = "smplterm.app:main"

[tool.hatch.build.targets.wheel]
packages = ["smplterm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
