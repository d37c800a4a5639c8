from setuptools import find_packages, setup

setup(
    name="room-footprint",
    version="0.1.0",
    packages=find_packages(include=["room_footprint", "room_footprint.*"]),
    install_requires=["pydantic>=2.0", "pydantic-settings>=2.0"],
    extras_require={
        "test": [
            "pytest",
            "pytest-cov",
        ]
    },
    python_requires=">=3.9",
    description=(
        "Minimum-area room footprint rectangles from scanned floor points"
    ),
)
