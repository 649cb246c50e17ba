[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mothership"
version = "0.1.0"
description = "A top-down space arcade game: fight a roaming mothership boss, its escorts and planetary gravity."
requires-python = ">=3.10"
keywords = ["game", "arcade", "space", "shooter", "pygame", "boss"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "numpy",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mothership = "mothership.app:main"

[tool.hatch.build.targets.wheel]
packages = ["mothership"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
