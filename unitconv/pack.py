#
# unitconv Packaging Tools
#

# Standard library -----------------------------------------------------------------------------------------------------
from importlib.metadata import PackageNotFoundError, version as metadata_version

# Third-party ----------------------------------------------------------------------------------------------------------
from packaging.version import InvalidVersion, Version

DIST_NAME = "unitconv"
UNKNOWN_VERSION = "0+unknown"


# Methods --------------------------------------------------------------------------------------------------------------

def package_version(dist_name: str = DIST_NAME) -> Version:
    """
    Installed version of a distribution as a PEP440 Version.

    Falls back to 0+unknown when the distribution is not installed, e.g. when run from a source checkout.

    Raises:
        InvalidVersion: If the installed metadata carries a non-PEP440 version.
    """
    try:
        raw_version = metadata_version(dist_name)
    except PackageNotFoundError:
        raw_version = UNKNOWN_VERSION
    try:
        return Version(raw_version)
    except InvalidVersion:
        raise InvalidVersion(f"Version '{raw_version}' of {dist_name} is not PEP440 compliant")


def version_string(prog: str = DIST_NAME, dist_name: str = DIST_NAME) -> str:
    """Program name and normalized version, as shown by --version."""
    return f"{prog} {package_version(dist_name)}"
