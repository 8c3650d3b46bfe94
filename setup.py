import setuptools

setuptools.setup(
    name='leelo',
    version='0.1.0',
    packages=setuptools.find_namespace_packages('src'),
    package_dir={'': 'src'},
    install_requires=[
        'voluptuous>=0.13',
    ],
    extras_require={
        'test': [
            'pytest>=7',
        ],
    },
    tests_require=[
        'pytest>=7',
    ],
    entry_points={
        'console_scripts': [
            'leelo=leelo.main:main',
        ],
    },
)
