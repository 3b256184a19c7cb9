[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hadiscovery"
version = "0.1.0"
description = "Home Assistant MQTT discovery entities: switches, locks, scenes, sensors and selects"
requires-python = ">=3.10"
dependencies = []
keywords = ["home-assistant", "mqtt", "discovery", "home-automation", "iot"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hadiscovery"]

[tool.pytest.ini_options]
addopts = "-ra"
