from setuptools import setup, find_packages
import os

BASE_DIR = os.path.dirname(os.path.realpath(__file__))
exec(open(os.path.join(
    BASE_DIR, 'canonical_opening_hours', 'version.py')).read())

setup(
    name="osm_canonical_opening_hours",
    version=__version__,  # noqa
    packages=find_packages(exclude=["doc", "tests"]),
    author="rezemika",
    author_email="reze.mika@gmail.com",
    description="Models of the opening_hours fields from OpenStreetMap, "
                "and their canonical rendering.",
    long_description=open(BASE_DIR + "/README.md", 'r').read(),
    long_description_content_type="text/markdown",
    install_requires=["lark", "astral>=2.0", "pytz"],
    extras_require={"test": ["pytest"]},
    package_data={"canonical_opening_hours": ["field.ebnf"]},
    include_package_data=True,
    url='http://github.com/rezemika/canonical_opening_hours',
    keywords="openstreetmap opening_hours parser",
    classifiers=[
        "Programming Language :: Python",
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU Affero General Public License v3",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Utilities",
        "Topic :: Other/Nonlisted Topic",
    ]
)
