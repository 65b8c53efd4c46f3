from setuptools import setup, find_packages


setup(
    name = "obtree",
    version = "0.1.0",
    description = "Ordered binary search tree with parent links",
    packages = find_packages(exclude=["tests"]),
    python_requires = ">=3.6",
    entry_points = {
        "console_scripts": [
            "obtree = obtree.main:main",
            ],
        },
    extras_require = {
        "test": [
            "pytest",
            "hypothesis",
            ],
        },
)
