#!/usr/bin/env python

from setuptools import find_packages, setup

setup(
    name='rectclip',
    version='0.1',
    description='Clip polylines and polygons to a bounding box',
    author='Matti Eiden',
    author_email='snaipperi@gmail.com',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    python_requires='>=3.10',
    install_requires=['pyclipper', 'numpy', 'shapely>=2.0'],
    extras_require={'test': ['pytest']},
)
