from setuptools import setup, find_namespace_packages


setup(
    name = "bstdrill",
    version = "0.1.0",
    description = "Unbalanced binary search tree with analysis queries",
    packages = find_namespace_packages(include=["bstdrill", "bstdrill.*"]),
    python_requires = ">=3.7",
    extras_require = {
        "test": [
            "pytest",
            "hypothesis",
            ],
        },
)
