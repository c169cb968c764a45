"""Architecture identifiers used as keys in per-architecture settings."""

from enum import Enum


class ArchType(str, Enum):
    """Target instruction-set architecture; the value is the JSON form.

    Only concrete target arches decode; "common" is not one of them.
    """

    ARM = "arm"
    ARM64 = "arm64"
    MIPS = "mips"
    MIPS64 = "mips64"
    X86 = "x86"
    X86_64 = "x86_64"

    def __str__(self) -> str:
        return self.value
