from importlib.metadata import version as dist_version, PackageNotFoundError

version = "0.1.0"


def agent_version():
    try:
        return dist_version("mountinfo")
    except PackageNotFoundError:
        return version
