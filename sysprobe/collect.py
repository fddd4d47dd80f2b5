"""Gathering of CPU, memory, disk, network and host information."""

from __future__ import annotations

import ipaddress
import logging
import platform
import socket
import sys

import psutil

from .models import CPU, DiskInfo, MemoryInfo, NetworkInfo, NodeInfo

logger = logging.getLogger(__name__)

CPUINFO_PATH = "/proc/cpuinfo"
PERCENT_INTERVAL = 3.0

_MB = 1024 * 1024
_ADDRESS_FAMILIES = (socket.AF_INET, socket.AF_INET6)


def _parse_cpuinfo(text: str) -> list[dict[str, str]]:
    """Split a cpuinfo listing into one mapping per processor."""
    entries: list[dict[str, str]] = []
    for line in text.splitlines():
        key, sep, value = line.partition(":")
        key = key.strip()
        if sep and key == "processor":
            entries.append({})
        if sep and entries:
            entries[-1][key] = value.strip()
    return entries


def _leading_number(text: str, kind: type, default: float) -> Any:
    try:
        return kind(text.split()[0])
    except (IndexError, ValueError):
        return kind(default)


def _cpu_entries() -> list[CPU]:
    try:
        with open(CPUINFO_PATH, encoding="utf-8") as handle:
            entries = _parse_cpuinfo(handle.read())
    except OSError:
        entries = []
    if entries:
        return [
            CPU(
                number=number,
                model_name=entry.get("model name", ""),
                cores=_leading_number(entry.get("cpu cores", ""), int, 1),
                mhz=_leading_number(entry.get("cpu MHz", ""), float, 0),
                cache_size=_leading_number(entry.get("cache size", ""), int, 0),
                flags=entry.get("flags", "").split(),
            )
            for number, entry in enumerate(entries)
        ]
    freq = psutil.cpu_freq() if hasattr(psutil, "cpu_freq") else None
    mhz = float(freq.current) if freq else 0.0
    count = psutil.cpu_count(logical=True) or 0
    return [
        CPU(number=number, model_name=platform.processor(), cores=1, mhz=mhz)
        for number in range(count)
    ]


def get_cpu_info() -> list[CPU]:
    """Describe every logical CPU, with its load measured over a few seconds."""
    try:
        cpus = _cpu_entries()
    except (OSError, psutil.Error) as exc:
        logger.error("get CPU info failed: %s", exc)
        return []
    if cpus:
        percents = psutil.cpu_percent(interval=PERCENT_INTERVAL, percpu=True)
        for cpu, percent in zip(cpus, percents):
            cpu.percent = percent
    return cpus


def get_memory_info() -> MemoryInfo:
    """Return virtual memory figures in megabytes."""
    try:
        vm = psutil.virtual_memory()
    except (OSError, psutil.Error):
        return MemoryInfo()
    return MemoryInfo(
        total=vm.total // _MB,
        available=vm.available // _MB,
        used=vm.used // _MB,
        used_percent=vm.percent,
        free=vm.free // _MB,
        cached=getattr(vm, "cached", 0) // _MB,
    )


def get_disk_info() -> list[DiskInfo]:
    """Return usage of every partition whose usage can be read."""
    try:
        partitions = psutil.disk_partitions(all=True)
    except (OSError, psutil.Error):
        return []
    disks = []
    for partition in partitions:
        try:
            usage = psutil.disk_usage(partition.mountpoint)
        except OSError:
            continue
        disks.append(
            DiskInfo(
                total=usage.total // _MB,
                available=usage.free // _MB,
                used=usage.used // _MB,
                used_percent=usage.percent,
                free=usage.free // _MB,
                name=partition.device,
                mountpoint=partition.mountpoint,
                type=partition.fstype,
            )
        )
    return disks


def _format_address(address: str, netmask: str | None) -> str:
    """Render an address in prefix notation, dropping any zone suffix."""
    address = address.split("%", 1)[0]
    try:
        prefix = bin(int(ipaddress.ip_address(netmask or ""))).count("1")
    except ValueError:
        return address
    return f"{address}/{prefix}"


def get_network_info() -> list[NetworkInfo]:
    """Return every network interface with its IP addresses."""
    try:
        interfaces = psutil.net_if_addrs()
    except (OSError, psutil.Error):
        return []
    return [
        NetworkInfo(
            name=name,
            address=[
                _format_address(addr.address, addr.netmask)
                for addr in addrs
                if addr.family in _ADDRESS_FAMILIES
            ],
        )
        for name, addrs in interfaces.items()
    ]


def _platform_details() -> tuple[str, str]:
    if platform.system() == "Linux":
        try:
            release = platform.freedesktop_os_release()
        except OSError:
            return "", ""
        return release.get("ID", ""), release.get("VERSION_ID", "")
    return platform.system().lower(), platform.version()


def get_node_info() -> NodeInfo:
    """Return host name and operating-system identification."""
    os_name = sys.platform
    if os_name.startswith("linux"):
        os_name = "linux"
    elif os_name in ("win32", "cygwin"):
        os_name = "windows"
    distribution, distribution_version = _platform_details()
    return NodeInfo(
        hostname=socket.gethostname(),
        os=os_name,
        platform=distribution,
        platform_version=distribution_version,
        kernel_version=platform.release(),
        arch=platform.machine(),
    )


from typing import Any  # noqa: E402