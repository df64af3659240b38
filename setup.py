from setuptools import find_packages, setup

setup(
    name='deposit_contract',
    version='0.1.0',
    description='Incremental Merkle accumulator for beacon chain validator deposits',
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "deposit_contract": ["configs/*.yaml"],
    },
    python_requires=">=3.9",
    install_requires=[
        "eth-utils>=2,<6",
        "eth-typing>=3,<6",
        "remerkleable>=0.1.28",
        "ruamel.yaml>=0.17",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "deposit-contract=deposit_contract.cli:main",
        ],
    },
)
