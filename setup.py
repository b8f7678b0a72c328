from __future__ import annotations

from setuptools import find_packages, setup


def load_dependencies() -> list[str]:
    """Assemble install_requires for the engine and its CLI."""
    return [
        # Data handling
        "pydantic>=2.0.0",
        # Command line
        "click>=8.1.0",
        "rich>=13.7.0",
    ]


setup(
    name="camera-animation-engine",
    version="0.1.0",
    description="Keypoint-driven camera animation: presets, auto keyframes, frame sequencing and previews",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=load_dependencies(),
    extras_require={
        "test": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "camera-animation=camera_animation.cli:main",
        ],
    },
)
