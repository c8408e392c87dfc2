"""Install the mock ORCID API tool."""

from setuptools import setup, find_packages

setup(
    name='moat',
    version='0.1.0',
    packages=find_packages(exclude=['*tests*']),
    py_modules=['wsgi'],
    package_data={'moat': ['tests/schema/*.json',
                           'serialize/tests/testdata/*.xml']},
    entry_points={'console_scripts': ['moat=moat.main:main']},
    install_requires=[
        "arxiv-base",
        "flask",
        "werkzeug",
        "python-json-logger>=3.1",
        "pytz"
    ],
    extras_require={
        'test': [
            "pytest",
            "hypothesis",
            "jsonschema"
        ]
    },
    python_requires='>=3.9',
    zip_safe=False
)
