# This source code is part of the molcodec package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

from importlib.metadata import version
import molcodec


def test_version():
    """
    Check if the version given in the package is the version of the
    installed distribution.
    """
    assert hasattr(molcodec, "__version__")
    assert molcodec.__version__ == version("molcodec")
