from setuptools import setup, find_packages

setup(
    name='macaca-interpreter',
    version='0.1.0',
    description='Macaca language tree-walking interpreter',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    python_requires='>=3.8',
    install_requires=[
        'click>=7.0',
        'rich>=10.0'
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'macaca = macaca.cli.main:cli'
        ]
    },
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
)
