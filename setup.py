import os
from setuptools import setup, find_packages

subpackages = find_packages("snipe")
packages = ["snipe"] + ["snipe." + p for p in subpackages]


def read_requirements(filename):
    with open(filename, "r") as f:
        return [line.strip() for line in f.readlines() if line.strip()]


setup(
    name="snipe",
    version="0.1.0",
    description="Blocktime estimator for Ethereum mainnet",
    packages=packages,
    package_dir={"snipe": "snipe"},
    include_package_data=True,
    data_files=[
        (
            os.path.join(
                "lib", "python{0}.{1}".format(*os.sys.version_info[:2]), "site-packages"
            ),
            ["logging.conf"],
        ),
    ],
    install_requires=read_requirements("requirements.txt"),
    extras_require={"test": read_requirements("requirements-test.txt")},
    entry_points={"console_scripts": ["snipe=snipe.main:main"]},
)
