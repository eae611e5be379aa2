import platform


def get_os():
    system = platform.system().lower()
    if system.startswith("darwin"):
        return "macos"
    if system.startswith("windows"):
        return "windows"
    return "linux"


def npm_executable():
    """npm ships as a batch shim on Windows, which subprocess will not resolve."""
    return "npm.cmd" if get_os() == "windows" else "npm"
