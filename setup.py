from setuptools import setup
from setuptools import find_packages


setup(
    name='Mintaka',
    version='0.1',
    description='A cycle-accurate model of a 5-stage pipelined RV32I core',
    license='BSD',
    python_requires='>=3.8',
    install_requires=["amaranth>=0.4", "PyYAML>=5.1"],
    extras_require={
        "test": ["pytest>=7"]
    },
    packages=find_packages(include=['mintaka', 'mintaka.*']),
)
