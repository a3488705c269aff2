"""Simulated apt/dpkg package manager for the package hunt stage."""
from __future__ import annotations

import hashlib
from dataclasses import dataclass, replace
from typing import List, Sequence

from termquest.services.content import format_output

TARGET_PACKAGE = "ubdecode"


@dataclass(slots=True)
class Package:
    name: str
    description: str
    installed: bool = False
    is_target: bool = False


DEFAULT_PACKAGES: tuple[Package, ...] = (
    Package("ubdecode", "Ubuntu decoder utility for decrypting encrypted files", is_target=True),
    Package("gimp", "GNU Image Manipulation Program for photo editing"),
    Package("curl", "Command-line tool for transferring data with URLs", installed=True),
    Package("nano", "Simple text editor for the terminal", installed=True),
    Package("firefox", "Mozilla Firefox web browser"),
    Package("vlc", "VLC media player for audio and video files"),
    Package("git", "Distributed version control system", installed=True),
)


class AptSimulator:
    """Answers apt and dpkg queries against an in-memory package list."""

    def __init__(self, packages: Sequence[Package] | None = None) -> None:
        source = packages if packages is not None else DEFAULT_PACKAGES
        self._packages: List[Package] = [replace(pkg) for pkg in source]

    def find(self, name: str) -> Package | None:
        for pkg in self._packages:
            if pkg.name == name:
                return pkg
        return None

    def is_installed(self, name: str) -> bool:
        pkg = self.find(name)
        return pkg is not None and pkg.installed

    def update(self) -> str:
        return format_output(
            [
                "Hit:1 http://archive.ubuntu.com/ubuntu focal InRelease",
                "Hit:2 http://archive.ubuntu.com/ubuntu focal-updates InRelease",
                "Hit:3 http://archive.ubuntu.com/ubuntu focal-backports InRelease",
                "Hit:4 http://security.ubuntu.com/ubuntu focal-security InRelease",
                "Reading package lists... Done",
                "Building dependency tree... Done",
                "Reading state information... Done",
                "All packages are up to date.",
            ]
        )

    def install(self, name: str) -> str:
        pkg = self.find(name)
        if pkg is None:
            return format_output([f"Package '{name}' not found", f"Try: apt search {name}"])
        if pkg.installed:
            return format_output(
                [
                    f"{name} is already the newest version (1.0-1).",
                    "0 upgraded, 0 newly installed, 0 to remove and 0 not upgraded.",
                ]
            )
        pkg.installed = True
        return format_output(
            [
                "Reading package lists... Done",
                "Building dependency tree... Done",
                "Reading state information... Done",
                "The following NEW packages will be installed:",
                f"  {name}",
                "0 upgraded, 1 newly installed, 0 to remove and 0 not upgraded.",
                "Need to get 0 B/2.5 MB of archives.",
                "After this operation, 5.2 MB of additional disk space will be used.",
                f"Get:1 http://archive.ubuntu.com/ubuntu focal/main amd64 {name} amd64 1.0-1 [2.5 MB]",
                "Fetched 2.5 MB in 2s (1,250 kB/s)",
                f"Selecting previously unselected package {name}.",
                "(Reading database ... 185,000 files and directories currently installed.)",
                f"Preparing to unpack .../{name}_1.0-1_amd64.deb ...",
                f"Unpacking {name} (1.0-1) ...",
                f"Setting up {name} (1.0-1) ...",
                "Processing triggers for man-db (2.9.1-1) ...",
                f"✓ {name} successfully installed!",
            ]
        )

    def remove(self, name: str) -> str:
        pkg = self.find(name)
        if pkg is None or not pkg.installed:
            return format_output(
                [
                    f"Package '{name}' is not installed, so not removed",
                    "0 upgraded, 0 newly installed, 0 to remove and 0 not upgraded.",
                ]
            )
        pkg.installed = False
        return format_output(
            [
                "Reading package lists... Done",
                "Building dependency tree... Done",
                "Reading state information... Done",
                "The following packages will be REMOVED:",
                f"  {name}",
                "0 upgraded, 0 newly installed, 1 to remove and 0 not upgraded.",
                "After this operation, 5.2 MB disk space will be freed.",
                "(Reading database ... 185,001 files and directories currently installed.)",
                f"Removing {name} (1.0-1) ...",
                "Processing triggers for man-db (2.9.1-1) ...",
                f"✓ {name} successfully removed!",
            ]
        )

    def list_installed(self) -> str:
        lines = ["Listing... Done"]
        for pkg in self._packages:
            if pkg.installed:
                lines.append(f"{pkg.name}/focal,now 1.0-1 amd64 [installed]")
        return format_output(lines)

    def search(self, term: str) -> str:
        needle = term.lower()
        matches = [
            pkg
            for pkg in self._packages
            if needle in pkg.name.lower() or needle in pkg.description.lower()
        ]
        if not matches:
            return f"No packages found matching '{term}'"
        lines = ["Sorting... Done", "Full Text Search... Done"]
        for pkg in matches:
            status = " [installed]" if pkg.installed else ""
            lines.append(f"{pkg.name}/focal 1.0-1 amd64{status}")
            lines.append(f"  {pkg.description}")
            lines.append("")
        return format_output(lines).strip()

    def show(self, name: str) -> str:
        pkg = self.find(name)
        if pkg is None:
            return format_output(
                [
                    f"Package: {name}",
                    "Status: not found",
                    "Description: Package not found",
                ]
            )
        digest = hashlib.md5(pkg.description.encode("utf-8")).hexdigest()
        return format_output(
            [
                f"Package: {pkg.name}",
                "Version: 1.0-1",
                "Priority: optional",
                "Section: misc",
                "Maintainer: Ubuntu Developers <ubuntu-devel-discuss@lists.ubuntu.com>",
                "Architecture: amd64",
                f"Source: {pkg.name}",
                f"Description: {pkg.description}",
                f" This package provides {pkg.name} utility.",
                f"Homepage: https://example.com/{pkg.name}",
                "Installed-Size: 5.2 MB",
                "Depends: libc6 (>= 2.14)",
                "Download-Size: 2.5 MB",
                f"Description-md5: {digest}",
            ]
        )

    def dpkg_list(self) -> str:
        lines = [
            "Desired=Unknown/Install/Remove/Purge/Hold",
            "| Status=Not/Inst/Conf-files/Unpacked/halF-conf/Half-inst/trig-aWait/Trig-pend",
            "|/ Err?=(none)/Reinst-required (Status,Err: uppercase=bad)",
            "||/ Name           Version      Architecture Description",
            "+++-==============-============-============-====================",
        ]
        for pkg in self._packages:
            if pkg.installed:
                lines.append(f"ii  {pkg.name:<14} 1.0-1        amd64        {pkg.description}")
        return format_output(lines)
