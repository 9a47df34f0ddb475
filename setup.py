from setuptools import setup, find_packages
from version import version


with open("README.rst") as f:
    long_description = f.read()

setup(
    name="PyIdioms",
    version=version,
    description="Python-style ranges, enumeration, zipping, products, "
                "slicing, splitting and joining over any sequence",
    long_description=long_description,
    keywords=['sequence', 'range', 'enumerate', 'zip', 'product', 'slice',
              'split', 'join', 'lazy', 'view'],
    license="Mozilla Public License 2.0 (MPL 2.0)",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)",
        "Development Status :: 3 - Alpha",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Intended Audience :: Developers"],
    packages=find_packages(exclude=['tests', 'docs']),
    python_requires='>=3.8',
    extras_require={
        'numpy support': [
            'numpy'],
        'tests': [
            'pytest', 'numpy', 'coverage']
    }
)
