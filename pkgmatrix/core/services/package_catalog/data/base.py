"""
L0 Data — Base system packages.

Everything a booted image needs regardless of boot mode. Always
resolved, for both trusted boot and legacy builds.
"""

from __future__ import annotations

from pkgmatrix.core.models.system import Architecture, Distro, Family
from pkgmatrix.core.services.package_catalog.data.catalog import Catalog
from pkgmatrix.core.services.package_catalog.domain.version_constraint import COMMON

ANY = Architecture.ANY

BASE = Catalog.build(
    "base",
    distros={
        Distro.DEBIAN: {
            ANY: {
                COMMON: ["systemd-resolved", "nohang", "polkitd"],
                # split out of systemd starting with 13
                ">=13": ["systemd-cryptsetup"],
            },
        },
        Distro.UBUNTU: {
            ANY: {
                COMMON: [
                    "fdisk",
                    "conntrack",
                    "console-data",
                    "cloud-guest-utils",  # growpart
                    "gettext",
                    "systemd-container",
                    "ubuntu-advantage-tools",
                    "tpm2-tools",
                    "dmsetup",
                    "networkd-dispatcher",
                    "packagekit-tools",
                    "publicsuffix",
                    "xdg-user-dirs",
                    "zfsutils-linux",
                ],
                ">=24.04": ["systemd-resolved"],
            },
        },
        Distro.FEDORA: {
            ANY: {
                COMMON: ["haveged", "systemd-networkd"],
            },
        },
    },
    families={
        Family.DEBIAN: {
            ANY: {
                COMMON: [
                    "ca-certificates",
                    "curl",  # also fetches netboot artifacts
                    "binutils",
                    "conntrack",
                    "console-setup",
                    "coreutils",
                    "cryptsetup",
                    "debianutils",
                    "ethtool",
                    "fuse3",
                    "gdisk",
                    "gnupg",
                    "gnupg1-l10n",
                    "haveged",
                    "iproute2",
                    "iptables",
                    "iputils-ping",
                    "krb5-locales",
                    "libatm1",
                    "libglib2.0-data",
                    "libgpm2",
                    "libldap-common",
                    "libnss-systemd",
                    "libpam-cap",
                    "libsasl2-modules",
                    "mdadm",
                    "nbd-client",
                    "ncurses-term",
                    "neovim",
                    "nfs-common",
                    "nftables",
                    "open-iscsi",
                    "openssh-server",
                    "open-vm-tools",
                    "os-prober",
                    "patch",
                    "pigz",
                    "pkg-config",
                    "psmisc",
                    "publicsuffix",
                    "python3-pynvim",
                    "shared-mime-info",
                    "snapd",
                    "systemd",
                    "systemd-timesyncd",
                    "systemd-sysv",  # reboot/shutdown
                    "xauth",
                    "xclip",
                    "xdg-user-dirs",
                    "xxd",
                    "xz-utils",
                    "zerofree",
                ],
            },
        },
        Family.REDHAT: {
            ANY: {
                COMMON: [
                    "gdisk",
                    "audit",
                    "cracklib-dicts",
                    "cloud-utils-growpart",
                    "device-mapper",
                    "openssh-server",
                    "openssh-clients",
                    "polkit",
                    "qemu-guest-agent",
                    "systemd",
                    "systemd-resolved",
                    "which",
                    "cryptsetup",
                ],
            },
        },
        Family.SUSE: {
            ANY: {
                COMMON: [
                    "curl",
                    "bash-completion",
                    "conntrack-tools",
                    "cryptsetup",
                    "coreutils",
                    "device-mapper",
                    "fail2ban",
                    "findutils",
                    "growpart",
                    "gptfdisk",
                    "haveged",
                    "htop",
                    "iproute2",
                    "iputils",
                    "issue-generator",
                    "logrotate",
                    "lsscsi",
                    "mdadm",
                    "multipath-tools",
                    "open-iscsi",
                    "openssh",
                    "open-vm-tools",
                    "pigz",
                    "policycoreutils",
                    "polkit",
                    "procps",
                    "qemu-guest-agent",
                    "strace",
                    "systemd",
                    "systemd-network",
                    "timezone",
                    "tmux",
                    "vim",
                    "which",
                    "tpm2*",
                ],
            },
        },
        Family.ALPINE: {
            ANY: {
                COMMON: [
                    "curl",
                    "bash",
                    "bash-completion",
                    "blkid",
                    "cloud-utils-growpart",
                    "bonding",
                    "bridge",
                    "busybox-openrc",
                    "ca-certificates",
                    "connman",
                    "conntrack-tools",
                    "coreutils",
                    "cryptsetup",
                    "device-mapper-udev",
                    "dbus",
                    "dmidecode",
                    "dosfstools",
                    "e2fsprogs",
                    "e2fsprogs-extra",
                    "efibootmgr",
                    "eudev",
                    "eudev-hwids",
                    "fail2ban",
                    "findutils",
                    "findmnt",
                    "gcompat",
                    "gettext",
                    "haveged",
                    "htop",
                    "hvtools",
                    "iproute2",
                    "irqbalance",
                    "iscsi-scst",
                    "kbd-bkeymaps",
                    "libc6-compat",
                    "libusb",
                    "lm-sensors",
                    "logrotate",
                    "lsscsi",
                    "lvm2-extra",
                    "mdadm",
                    "mdadm-misc",
                    "mdadm-udev",
                    "multipath-tools",
                    "ncurses",
                    "ncurses-terminfo",
                    "nfs-utils",
                    "open-iscsi",
                    "openrc",
                    "openssh-client",
                    "openssh-server",
                    "open-vm-tools",
                    "open-vm-tools-deploypkg",
                    "open-vm-tools-guestinfo",
                    "open-vm-tools-static",
                    "open-vm-tools-vmbackup",
                    "procps",
                    "qemu-guest-agent",
                    "rbd-nbd",
                    "sgdisk",
                    "smartmontools",
                    "squashfs-tools",
                    "strace",
                    "tzdata",
                    "util-linux",
                    "vim",
                    "which",
                    "wireguard-tools",
                    "wpa_supplicant",
                    "xfsprogs",
                    "xfsprogs-extra",
                    "xz",
                ],
            },
        },
    },
)
