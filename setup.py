# setup.py
from setuptools import setup, find_packages

setup(
    name="shape-schema",              # the *distribution* name on PyPI
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),  # will find shape_schema/
    install_requires=["pandas"],      # DataFrame values and predicates
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": ["shape-schema = shape_schema.parser:main"],
    },
    python_requires=">=3.9",
    description="Runtime shape validation with precise mismatch reporting",
    author="Your Name",
    license="Creative Commons Attribution-NonCommercial-ShareAlike 4.0 International License",
)
