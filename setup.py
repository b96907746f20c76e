from setuptools import setup, find_packages

setup(
    name="othello_ai",
    version="0.1",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=["numpy"],
    extras_require={"test": ["pytest"]},
)
