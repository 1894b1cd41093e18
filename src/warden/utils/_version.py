from importlib.metadata import PackageNotFoundError, version


def get_package_version() -> str:
    """Get the installed warden version, or "unknown" for source checkouts."""
    try:
        return version("warden")
    except PackageNotFoundError:
        return "unknown"
