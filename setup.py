"""Install the authorize endpoint service."""

from setuptools import setup, find_packages

setup(
    name='gatekeeper',
    version='0.1.0',
    packages=find_packages(exclude=['*.tests', '*.tests.*']),
    package_data={'gatekeeper': ['templates/gatekeeper/*.html']},
    install_requires=[
        "flask",
        "werkzeug",
        "authlib",
        "pyjwt",
        "pytz",
        "python-json-logger",
        "markupsafe"
    ],
    extras_require={
        'test': [
            "pytest",
            "hypothesis"
        ]
    },
    zip_safe=False
)
