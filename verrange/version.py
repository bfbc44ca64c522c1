"""Version information for the verrange package."""

__version__ = "1.0.0"  # Python package version

# Build information
__build_date__ = "2026-10-17"

# Component licenses
__license__ = "MIT"


def get_version_info():
    """Return version information as a dictionary."""
    return {
        "version": __version__,
        "build_date": __build_date__,
        "license": __license__,
    }
