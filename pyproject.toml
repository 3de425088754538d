[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kumihan"
version = "0.1.0"
description = "Japanese text typesetting: kinsoku line breaking, hanging punctuation, ruby parsing, vertical forms and a plain-text command-line typesetter"
requires-python = ">=3.10"
dependencies = []
keywords = ["japanese", "typesetting", "kinsoku", "ruby", "furigana", "vertical-writing", "jis-x-4051"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Natural Language :: Japanese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kumihan = "kumihan.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["kumihan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
