from setuptools import setup

with open("README.md") as f:
    readme = f.read()

about = {}
with open("footway_navigator/_version.py") as f:
    exec(f.read(), about)

setup(
    name=about["__title__"],
    version=about["__version__"],
    description=about["__description__"],
    long_description=readme,
    long_description_content_type="text/markdown",
    author=about["__author__"],
    author_email=about["__author_email__"],
    url=about["__url__"],
    license=about["__license__"],
    packages=[
        "footway_navigator",
        "footway_navigator.maps",
        "footway_navigator.maps.dijkstra",
        "footway_navigator.observer",
        "footway_navigator.osm_map",
    ],
    install_requires=[
        "openlr==1.0.1",
        "geographiclib",
        "shapely",
    ],
    test_suite="tests",
    python_requires=">=3.7",
    classifiers=[
        "Intended Audience :: Developers",
        "Natural Language :: English",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
    ],
)
