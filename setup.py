from setuptools import setup

setup(
    name='ini-reader',
    version='1.2',
    packages=['inireader'],
    package_dir={'inireader': 'inireader'},
    python_requires='>=3.6',
    license='gpl3',
    author='ini-reader developers',
    description="Ini file reader",
    long_description="""Reads [section] / key = value / ; comment files
into a section -> key -> value store, with precise syntax errors
(file, line and the tokens around the fault)."""
)
