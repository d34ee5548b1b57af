from setuptools import find_packages, setup

with open("README.md", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="pyfastpix",
    version="0.0.1",
    author="Boris Gailleton",
    author_email="boris.gailleton@univ-rennes.fr",
    description="Bilinear and Gaussian image resampling with a Taichi parallel backend",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Multimedia :: Graphics",
        "Topic :: Scientific/Engineering :: Image Processing",
    ],
    python_requires=">=3.9",
    install_requires=[
        "taichi>=1.4.0",
        "numpy>=1.20.0",
        "matplotlib>=3.3.0",
        "click>=7.0",
        "pillow>=8.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
            "black",
            "flake8",
        ],
    },
    keywords="image resampling bilinear gaussian blur antialiasing taichi",
    entry_points={
        "console_scripts": [
            "pfp-downscale=pyfastpix.cli.image_commands:image_downscale",
            "pfp-blur=pyfastpix.cli.image_commands:image_blur",
            "pfp-antialias=pyfastpix.cli.image_commands:image_antialias",
            "pfp-greenify=pyfastpix.cli.image_commands:image_greenify",
            "pfp-normalize=pyfastpix.cli.image_commands:image_normalize",
        ],
    },
)
