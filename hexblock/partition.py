"""Drive and partition descriptions derived from disk geometry and layout."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

DRIVE_PART_FORMAT = "Drive {drive}, Partition {partition} ({size})"
DRIVE_ONLY_FORMAT = "Drive {drive} ({size})"

_MB = 1024 * 1024


def format_size(length: int) -> str:
    """Human-readable size in MB, GB or TB with two decimals."""
    size_mb = length / _MB
    if size_mb < 1024.0:
        return f"{size_mb:.2f} MB"
    size_gb = size_mb / 1024
    if size_gb < 1024.0:
        return f"{size_gb:.2f} GB"
    return f"{size_gb / 1024:.2f} TB"


@dataclass(frozen=True)
class DiskGeometry:
    """Physical layout of a disk."""

    cylinders: int
    tracks_per_cylinder: int
    sectors_per_track: int
    bytes_per_sector: int

    @property
    def total_sectors(self) -> int:
        return self.cylinders * self.sectors_per_track * self.tracks_per_cylinder


@dataclass(frozen=True)
class LayoutEntry:
    """One entry of a drive's partition table."""

    starting_offset: int
    partition_length: int


@dataclass
class PartitionInfo:
    """A whole drive or one partition on it, located in sectors and bytes."""

    drive: int
    partition: int
    is_partition: bool
    bytes_per_sector: int
    number_of_sectors: int
    starting_offset: int
    starting_sector: int
    partition_length: int

    def size_as_string(self) -> str:
        """The length formatted as MB, GB or TB."""
        return format_size(self.partition_length)

    def name_as_string(self) -> str:
        """A label naming the drive (and partition), numbered from one."""
        if self.is_partition:
            return DRIVE_PART_FORMAT.format(
                drive=self.drive + 1,
                partition=self.partition + 1,
                size=self.size_as_string(),
            )
        return DRIVE_ONLY_FORMAT.format(drive=self.drive + 1, size=self.size_as_string())


def whole_drive_info(drive: int, geometry: DiskGeometry, is_partition: bool) -> PartitionInfo:
    """Describe the whole drive as a single entry starting at sector zero."""
    sectors = geometry.total_sectors
    return PartitionInfo(
        drive=drive,
        partition=0,
        is_partition=is_partition,
        bytes_per_sector=geometry.bytes_per_sector,
        number_of_sectors=sectors,
        starting_offset=0,
        starting_sector=0,
        partition_length=sectors * geometry.bytes_per_sector,
    )


def partitions_from_layout(
    drive: int,
    geometry: DiskGeometry,
    entries: Iterable[LayoutEntry],
    skip_empty: bool = False,
) -> list[PartitionInfo]:
    """Describe each layout entry; entries keep their table index as number.

    With ``skip_empty`` entries of zero length are left out.
    """
    bps = geometry.bytes_per_sector
    if bps <= 0:
        raise ValueError("bytes per sector must be positive")
    result = []
    for index, entry in enumerate(entries):
        if skip_empty and not entry.partition_length:
            continue
        result.append(
            PartitionInfo(
                drive=drive,
                partition=index,
                is_partition=True,
                bytes_per_sector=bps,
                number_of_sectors=entry.partition_length // bps,
                starting_offset=entry.starting_offset,
                starting_sector=entry.starting_offset // bps,
                partition_length=entry.partition_length,
            )
        )
    return result