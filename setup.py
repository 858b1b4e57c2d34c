from pathlib import Path

from setuptools import find_packages, setup

setup(
    name='stereostation',
    version='1.0.0',
    packages=find_packages(include=['stereostation', 'stereostation.*']),
    license='GPLv3',
    description='Digitization and reconstruction of a stereo strip/wire detection station',
    long_description=(Path(__file__).parent / 'README.rst').read_text(),
    keywords=['detector simulation', 'stereo strips', 'reconstruction'],
    classifiers=[
        'Intended Audience :: Science/Research',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering :: Physics',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
    ],
    entry_points={
        'console_scripts': [
            'simulate_station = stereostation.simulations.base:main',
        ],
    },
    package_data={
        'stereostation': ['data/*.json'],
    },
    install_requires=['numpy', 'scipy', 'progressbar2>=3.7.0'],
    extras_require={'dev': ['Sphinx', 'ruff', 'coverage'], 'test': ['mock', 'pytest']},
)
