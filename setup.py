from setuptools import setup, find_packages

setup(
    name="devops_sample",
    version="1.0.0",
    description="DevOps sample Flask welcome application",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    py_modules=["run"],
    include_package_data=True,
    package_data={"devops_web": ["templates/*.html"]},
    install_requires=[
        "Flask>=3.0,<4",
    ],
    extras_require={
        "test": [
            "pytest>=8,<9",
            "beautifulsoup4>=4.12,<5",
        ],
    },
    python_requires=">=3.10",
)
