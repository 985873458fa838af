"""
Setup script for the learning map course format.
"""

from setuptools import find_packages, setup

setup(
    name="openedx-format-learningmap",
    version="0.1.0",
    description="Course format that turns the first learning map of a course into its landing page.",
    python_requires=">=3.9",
    install_requires=[
        "Django",
        "edx-django-utils",
        "edx-toggles",
    ],
    extras_require={
        "test": [
            "ddt",
            "pytest",
            "pytest-django",
        ],
    },
    packages=find_packages(include=["learningmap_format", "learningmap_format.*"]),
    package_data={
        "learningmap_format": ["templates/learningmap_format/*.html", "templates/learningmap_format/*/*/*/*.html"],
    },
    entry_points={
        "lms.djangoapp": [
            "learningmap_format = learningmap_format.apps:LearningMapFormatConfig",
        ],
    },
)
