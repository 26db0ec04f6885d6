# setup.py
from setuptools import setup, find_packages

setup(
    name="park_analyzer",
    version="0.1.0",
    packages=find_packages(include=['park_analyzer', 'park_analyzer.*']),
    install_requires=[
        "construct>=2.10",
        "tqdm>=4.0",
    ],
    extras_require={
        "test": ["pytest>=7.0.0"],
    },
    python_requires=">=3.8",
    description="A tool for decoding OpenRCT2 park save files",
    keywords="openrct2, park, save, decoder",
    entry_points={
        'console_scripts': [
            'analyze-park=park_analyzer.main:main',
        ],
    }
)
