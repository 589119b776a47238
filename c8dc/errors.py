"""Exceptions raised while loading and reading ROM images."""


class C8dcError(Exception):
    """Base class for all c8dc errors."""


class RomError(C8dcError):
    """The ROM image could not be loaded. Fatal for the run."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: {path}")


class RomNotFoundError(RomError, FileNotFoundError):
    """ROM file does not exist."""

    def __init__(self, path: str):
        super().__init__(path, "could not find rom image")


class RomUnreadableError(RomError):
    """ROM file exists but could not be opened or read."""

    def __init__(self, path: str, reason: str = "could not read rom image"):
        super().__init__(path, reason)


class AllocationError(RomError):
    """No buffer could be obtained for the image."""

    def __init__(self, path: str, size: int):
        self.size = size
        super().__init__(path, f"could not allocate {size} bytes for rom image")


class AddressOutOfRangeError(C8dcError, IndexError):
    """A word was requested past the end of the memory buffer."""

    def __init__(self, address: int, limit: int):
        self.address = address
        self.limit = limit
        super().__init__(f"word at 0x{address:04X} extends past buffer end 0x{limit:04X}")
