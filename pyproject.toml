[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "goveebridge"
version = "0.1.0"
description = "Device model, quirks, temperature handling and MQTT topic helpers for bringing Govee devices into Home Assistant"
requires-python = ">=3.10"
dependencies = []
keywords = ["govee", "home-assistant", "mqtt", "smart-home", "lights"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
packages = ["goveebridge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
