[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pacshop"
version = "0.1.0"
description = "A small Presentation-Abstraction-Control web shop with customers, sellers, products and orders"
requires-python = ">=3.10"
dependencies = [
    "flask",
]
keywords = ["shop", "e-commerce", "pac", "flask", "wsgi", "orders", "products"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pacshop = "pacshop.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pacshop"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
