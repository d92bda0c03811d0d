[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "hospital-billing"
version = "0.1.0"
description = "Hospital patient billing: room, surgery and pharmacy charges with a small Tk window and CSV export"
requires-python = ">=3.10"
dependencies = []
keywords = ["hospital", "billing", "patients", "charges", "csv", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Environment :: MacOS X",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hospital-billing = "hospital_billing.gui:main"

[tool.setuptools.packages.find]
include = ["hospital_billing*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
