[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternkit"
version = "0.1.0"
description = "Small, runnable examples of the classic object-oriented design patterns."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design patterns",
    "gang of four",
    "observer",
    "strategy",
    "visitor",
    "decorator",
    "examples",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development",
]

[project.optional-dependencies]
test = ["pytest>=7"]

[project.scripts]
patternkit-command = "patternkit.command:main"
patternkit-visitor = "patternkit.visitor:main"
patternkit-observer = "patternkit.observer:main"
patternkit-strategy = "patternkit.strategy:main"
patternkit-chain = "patternkit.chain:main"
patternkit-composite = "patternkit.composite:main"
patternkit-iterator = "patternkit.iterator:main"
patternkit-interpreter = "patternkit.interpreter:main"
patternkit-adapter = "patternkit.adapter:main"
patternkit-facade = "patternkit.facade:main"
patternkit-mediator = "patternkit.mediator:main"
patternkit-proxy = "patternkit.proxy:main"
patternkit-builder = "patternkit.builder:main"
patternkit-factory = "patternkit.factory:main"
patternkit-prototype = "patternkit.prototype:main"
patternkit-flyweight = "patternkit.flyweight:main"
patternkit-singleton = "patternkit.singleton:main"
patternkit-bridge = "patternkit.bridge:main"
patternkit-messenger = "patternkit.messenger:main"
patternkit-decorator = "patternkit.decorator:main"
patternkit-memento = "patternkit.memento:main"
patternkit-state = "patternkit.state:main"

[tool.hatch.build.targets.wheel]
packages = ["patternkit"]

[tool.hatch.build.targets.sdist]
include = ["patternkit", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
files = ["patternkit"]
warn_unused_ignores = true

[tool.coverage.run]
source = ["patternkit"]
branch = true
