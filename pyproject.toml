[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "morsebridge"
version = "0.1.0"
description = "Convert between Cyrillic text and Morse code, as a library and a small WSGI upload service"
requires-python = ">=3.10"
keywords = ["morse", "morse-code", "cyrillic", "converter", "wsgi"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Ham Radio",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
]
dependencies = [
    "werkzeug",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
morsebridge = "morsebridge.server:main"

[tool.hatch.build.targets.wheel]
packages = ["morsebridge"]

[tool.pytest.ini_options]
addopts = "-ra"
