"""
Default unit test configuration and fixtures.
"""

from unittest import TestCase

# When using self.assertEquals, diffs are truncated. We don't want that, always
# show the whole diff.
TestCase.maxDiff = None
