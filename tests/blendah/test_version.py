import logging
import os
import re

import blendah
from blendah.version import __version__

logger = logging.getLogger(__name__)


def test_version_file_is_parseable():
    # setup.py reads the version with a regular expression instead of running
    # version.py, so the assignment must stay a plain string literal.
    path = os.path.join(os.path.dirname(blendah.__file__), "version.py")
    with open(path) as f:
        match = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.M)
    assert match is not None
    assert match.group(1) == __version__
