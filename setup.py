from setuptools import setup, find_packages


PACKAGE_NAME = "geodraw"
PACKAGE_VERSION = "0.1.0"
PACKAGE_DESCRIPTION = """This package implements the editing core of a map drawing tool:
a draw session state machine, bounded undo/redo and point/polygon validation
"""
INSTALL_REQUIREMENTS = [
    "shapely>=2.0",
    "loguru",
    "PyYAML",
]
TEST_REQUIREMENTS = [
    "pytest",
]


setup(
    name=PACKAGE_NAME,
    version=PACKAGE_VERSION,
    description=PACKAGE_DESCRIPTION,
    license="GPLv3",
    packages=find_packages(include=["geodraw", "geodraw.*"]),
    install_requires=INSTALL_REQUIREMENTS,
    extras_require={"test": TEST_REQUIREMENTS},
    zip_safe=False,
    python_requires=">=3.10",
)
