from setuptools import setup, find_packages

setup(
    name="fd-advection",
    version="0.1.0",
    description="""Explicit upwind finite difference solver for 2D scalar advection
    in a logarithmic boundary layer velocity profile.""",
    packages=find_packages(include=["finite_difference", "finite_difference.*"]),
    install_requires=["numpy", "matplotlib", "tqdm"],
    extras_require={"test": ["pytest"]},
)
