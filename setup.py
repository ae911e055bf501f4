import setuptools

setuptools.setup(
    name = 'camber',
    version = '1.0',
    description = 'curve interpolation: Bezier, Hermite, Catmull-Rom, cubic and B-splines, NURBS and easing functions',
    packages = setuptools.find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.6',
    install_requires=['numpy', 'scipy'],
    extras_require={'test': ['pytest']},
)
