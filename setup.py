from setuptools import find_packages, setup

setup(
    name="ruby-version-checker",
    version="0.1.0",
    description="Report the latest patch release of every Ruby 3.x minor line",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "requests",
        "semver>=3",
        "PyYAML",
        "platformdirs",
        "rich",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-mock",
        ],
    },
    entry_points={
        "console_scripts": [
            "ruby-version-checker=ruby_version_checker.cli:main",
        ],
    },
)
