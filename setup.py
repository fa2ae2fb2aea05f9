import os
import re
from setuptools import setup, find_packages

# Utility function to read the README file.
# Used for the long_description.  It's nice, because now 1) we have a top level
# README file and 2) it's easier to type in the README file than to put a raw
# string in below ...
def read(fname):
    with open(os.path.join(os.path.dirname(__file__), fname)) as f:
        return f.read()


def get_version():
    text = read(os.path.join('matprops', 'version.py'))
    return re.search(r"__version__ = '([^']+)'", text).group(1)


install_requires = [
        "numpy",
        ]

extras_require = {
        "test": [
            "pytest",
            "coveralls",
            ],
        }

CLASSIFIERS = """\

Development Status :: 3 - Alpha
Intended Audience :: Science/Research
Intended Audience :: Developers
Intended Audience :: Education
Topic :: Scientific/Engineering :: Physics
License :: OSI Approved :: BSD License
Operating System :: Microsoft :: Windows
Programming Language :: Python :: 3
Operating System :: Unix

"""

setup(
    name = "matprops",
    version = get_version(),
    description = ("Homogenized Properties of Composites and Honeycombs"),
    license = "BSD",
    keywords = "micromechanics composite honeycomb thermal conductivity thermal expansion",
    packages=find_packages(),
    long_description=read('README.md'),
    long_description_content_type="text/markdown",
    classifiers=[_f for _f in CLASSIFIERS.split('\n') if _f],
    python_requires=">=3.8",
    install_requires=install_requires,
    extras_require=extras_require,
)
