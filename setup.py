from setuptools import setup, find_packages

# Core dependencies
core_requirements = [
    "typing-extensions>=4.4.0",
    "defusedxml>=0.7.1"
]

# Optional test dependencies
test_requirements = [
    "pytest>=7.0.0"
]

setup(
    name="svg_scene",
    version="0.1.0",
    description="Build scenes of circles, polylines and text labels and serialize them to SVG",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=core_requirements,
    extras_require={
        "test": test_requirements,
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "svg-scene-demo=svg_scene.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)
