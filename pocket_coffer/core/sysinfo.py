"""
Live host information for the system tools panel.
Every field is read independently; a field that cannot be read falls back to
0 or "Unknown" without affecting the others.
"""

import platform
import socket
from dataclasses import dataclass, asdict
from typing import Any, Dict, Tuple

import psutil

from ..util.logging import logger

UNKNOWN = "Unknown"


@dataclass
class SystemInfo:
    os_name: str
    os_version: str
    kernel_version: str
    hostname: str
    cpu_name: str
    cpu_cores: int
    total_memory: int
    used_memory: int
    total_disk: int
    used_disk: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class SystemInfoCollector:
    """Collects host information from psutil and the platform module."""

    def collect(self) -> SystemInfo:
        total_memory, used_memory = self._get_memory()
        total_disk, used_disk = self._get_disks()
        return SystemInfo(
            os_name=self._safe_str(self._get_os_name, "os_name"),
            os_version=self._safe_str(platform.version, "os_version"),
            kernel_version=self._safe_str(platform.release, "kernel_version"),
            hostname=self._safe_str(socket.gethostname, "hostname"),
            cpu_name=self._safe_str(self._get_cpu_name, "cpu_name"),
            cpu_cores=self._get_cpu_cores(),
            total_memory=total_memory,
            used_memory=used_memory,
            total_disk=total_disk,
            used_disk=used_disk,
        )

    def _safe_str(self, getter, field: str) -> str:
        try:
            value = getter()
        except Exception as e:
            logger.warning(f"System info field '{field}' unavailable: {e}")
            return UNKNOWN
        return value or UNKNOWN

    def _get_os_name(self) -> str:
        system = platform.system()
        if system == "Linux":
            try:
                release = platform.freedesktop_os_release()
                return release.get("NAME") or system
            except OSError:
                return system
        if system == "Darwin":
            return "macOS"
        return system

    def _get_cpu_name(self) -> str:
        if platform.system() == "Linux":
            try:
                with open("/proc/cpuinfo", encoding="utf-8") as cpuinfo:
                    for line in cpuinfo:
                        if line.lower().startswith("model name"):
                            return line.split(":", 1)[1].strip()
            except OSError:
                pass
        return platform.processor()

    def _get_cpu_cores(self) -> int:
        try:
            return psutil.cpu_count(logical=True) or 0
        except Exception as e:
            logger.warning(f"System info field 'cpu_cores' unavailable: {e}")
            return 0

    def _get_memory(self) -> Tuple[int, int]:
        try:
            memory = psutil.virtual_memory()
            return int(memory.total), int(memory.total - memory.available)
        except Exception as e:
            logger.warning(f"System info field 'memory' unavailable: {e}")
            return 0, 0

    def _get_disks(self) -> Tuple[int, int]:
        """Sum total/used bytes over mounted volumes, counting each device once."""
        try:
            partitions = psutil.disk_partitions(all=False)
        except Exception as e:
            logger.warning(f"System info field 'disks' unavailable: {e}")
            return 0, 0

        total = used = 0
        seen = set()
        for partition in partitions:
            device = partition.device or partition.mountpoint
            if device in seen:
                continue
            try:
                usage = psutil.disk_usage(partition.mountpoint)
            except (OSError, PermissionError) as e:
                logger.debug(f"Skipping volume {partition.mountpoint}: {e}")
                continue
            seen.add(device)
            total += int(usage.total)
            used += int(usage.used)
        return total, used


def get_system_info() -> SystemInfo:
    """Query the running host."""
    return SystemInfoCollector().collect()
