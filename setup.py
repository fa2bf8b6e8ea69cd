from setuptools import setup


setup(
    # Required meta-data:
    name='fundeps',
    version='0.1.0',
    packages=['fundeps', 'fundeps.cli'],
    package_dir={'': 'src'},
    # Additional fields:
    install_requires=[
        'typing_extensions;python_version<"3.11"',
        'colorama;platform_system=="Windows"',
    ],
    python_requires='>=3.8',
    entry_points={
        'console_scripts': ['fundeps=fundeps.cli.main:main'],
    },
    description='Closures, minimal covers, and candidate keys for functional dependencies',
    long_description='',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Education',
        'Topic :: Database',
    ],
)
