import pytest

from crosspath import Config, PathModule, PlatformStyle


@pytest.fixture
def posix_cwd():
    """Fixed current directory for POSIX-style tests."""
    return "/home/user/project"


@pytest.fixture
def windows_cwd():
    """Fixed current directory for Windows-style tests."""
    return "C:\\Users\\user\\project"


@pytest.fixture
def posix(posix_cwd):
    """POSIX path module with a fixed current directory."""
    return PathModule(Config(
        platform_style=PlatformStyle.POSIX,
        current_directory_provider=lambda: posix_cwd,
    ))


@pytest.fixture
def windows(windows_cwd):
    """Windows path module with a fixed current directory."""
    return PathModule(Config(
        platform_style=PlatformStyle.WINDOWS,
        current_directory_provider=lambda: windows_cwd,
    ))
