"""
Build script for toph. Metadata lives in pyproject.toml.

The encoder can be compiled with mypyc:

    TOPH_USE_MYPYC=1 pip install .[mypyc]
"""

import os

from setuptools import setup

# markup.py stays interpreted because mypyc cannot compile str subclasses,
# visitor.py because NodeVisitor is subclassed by interpreted code.
MYPYC_MODULES = ["src/toph/encode.py"]


def ext_modules() -> list:
    if os.environ.get("TOPH_USE_MYPYC", "0") != "1":
        return []
    from mypyc.build import mypycify

    return mypycify(MYPYC_MODULES, opt_level=os.environ.get("MYPYC_OPT_LEVEL", "3"))


setup(ext_modules=ext_modules())
