#!/usr/bin/env python

from setuptools import setup

setup(
    name="estemplate",
    version="0.1.0",
    description="Builders for Elasticsearch index templates",
    packages=["estemplate"],
    include_package_data=True,
    zip_safe=False,
    keywords=["elasticsearch", "index template", "mapping"],
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Topic :: Database",
    ],
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",
        "pydantic-settings",
        "python-dotenv",
        "typing-extensions",
    ],
    extras_require={
        'dev': [
            'pytest',
            'mypy',
            'flake8',
        ]
    },
    entry_points={
        'console_scripts': [
            'estemplate = estemplate.__main__:main'
        ]
    },
)
