from setuptools import setup, find_packages

setup(
    name="subsweep",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "dnspython>=2.1",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
    entry_points={
        "console_scripts": [
            "subsweep = subsweep.cli:main",
        ],
    },
    author="exfil0",
    description="Subdomain brute-forcer with resolver health probing, wildcard filtering and CDN detection",
    license="MIT",
    keywords="subdomain enumeration recon security dns",
)
