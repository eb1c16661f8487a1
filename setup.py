from setuptools import setup, find_packages

# keep in sync with cbremap/contrib.py
version = "0.3.0"

install_requires = [
    "pyyaml",
    "setproctitle",
    "pandas",
]

if __name__ == "__main__":
    setup(
        name='cbremap',  # Required
        version=version,
        description="re-map Drop-seq cell barcodes with one substitution or deletion "
        "onto a list of barcodes to use",
        license="GPL",
        python_requires=">=3.8",
        packages=find_packages(include=["cbremap", "cbremap.*"]),
        package_data={"cbremap": ["data/config/*.yaml"]},
        install_requires=install_requires,
        extras_require={"test": ["pytest"]},
        entry_points={
            "console_scripts": ["cbremap = cbremap.cmdline:entry_point"],
        },
    )
