# setup.py
from setuptools import setup, find_packages

setup(
    name="lispy",
    version="0.1.0",
    description="A small Lisp with literal lists, curried closures and an interactive REPL",
    packages=find_packages(exclude=["tests", "tests.*"]),
    # The standard prelude ships with the package
    package_data={"lispy": ["prelude/*.lspy"]},
    python_requires=">=3.10",
    install_requires=[
        "prompt_toolkit>=3.0",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["lispy=lispy.repl:main"],
    },
    zip_safe=False,
)
