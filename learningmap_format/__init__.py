"""
Course format that turns the first learning map of a course into its landing page.
"""

__version__ = '0.1.0'
