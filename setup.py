from setuptools import find_packages, setup

setup(
    name="dissect.crc32c",
    version="1.0",
    description="A pure Python CRC32C (Castagnoli) implementation with canonical integer marshaling",
    python_requires=">=3.9",
    packages=list(map(lambda v: "dissect." + v, find_packages("dissect"))),
    extras_require={
        "test": [
            "pytest",
            "pytest-benchmark",
        ],
    },
    entry_points={
        "console_scripts": [
            "crc32c-sum=dissect.crc32c.tools.crc32c_sum:main",
        ],
    },
)
