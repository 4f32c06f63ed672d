from setuptools import setup, find_packages

setup(
    name='qtile-litclock',
    packages=find_packages(exclude=["test*"]),
    include_package_data=True,
    version='0.1.0',
    description='A word clock for qtile that highlights the time in a grid of letters.',
    author='elParaguayo',
    url='https://github.com/elparaguayo/qtile-litclock',
    license='MIT',
    python_requires='>=3.10',
    install_requires=[
        'qtile',
        'cairocffi',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
