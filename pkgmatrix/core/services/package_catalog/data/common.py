"""
L0 Data — Packages named the same on every distro and architecture.

Always the first packages of every resolved set.
"""

from __future__ import annotations

COMMON_PACKAGES: tuple[str, ...] = (
    "file",
    "gawk",
    "iptables",
    "less",
    "nano",
    "sudo",         # lets the default user run commands as root
    "tar",
    "zstd",
    "rsync",        # install/upgrade/reset sync the system with it
    "lvm2",
    "jq",
    "dosfstools",   # FAT32 for the EFI partition
    "e2fsprogs",    # mkfs for ext2/3/4
    "parted",
)
