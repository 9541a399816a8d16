import pytest

from hexblock.partition import (
    DiskGeometry,
    LayoutEntry,
    PartitionInfo,
    format_size,
    partitions_from_layout,
    whole_drive_info,
)

MB = 1024 * 1024


def _geometry():
    return DiskGeometry(
        cylinders=100, tracks_per_cylinder=16, sectors_per_track=63, bytes_per_sector=512
    )


def test_format_size_megabytes():
    assert format_size(MB) == "1.00 MB"


def test_format_size_gigabytes():
    assert format_size(1024 * MB) == "1.00 GB"


def test_format_size_terabytes():
    assert format_size(1024 * 1024 * MB) == "1.00 TB"


@pytest.mark.parametrize(
    "length, unit",
    [(0, " MB"), (1023 * MB, " MB"), (5 * 1024 * MB, " GB"), (3 * 1024 ** 4, " TB")],
)
def test_format_size_units(length, unit):
    assert format_size(length).endswith(unit)


def test_whole_drive_info_multiplies_geometry():
    geometry = _geometry()
    info = whole_drive_info(2, geometry, False)
    assert info.drive == 2
    assert info.partition == 0
    assert info.is_partition is False
    assert info.number_of_sectors == 100 * 16 * 63
    assert info.partition_length == info.number_of_sectors * 512
    assert info.starting_offset == 0
    assert info.starting_sector == 0
    assert info.bytes_per_sector == 512


def test_whole_drive_info_as_partition():
    info = whole_drive_info(0, _geometry(), True)
    assert info.is_partition is True


def test_partitions_from_layout_computes_sectors():
    entries = [LayoutEntry(512 * 10, 512 * 40), LayoutEntry(512 * 50, 512 * 7)]
    infos = partitions_from_layout(1, _geometry(), entries)
    assert [i.partition for i in infos] == [0, 1]
    assert [i.starting_sector for i in infos] == [10, 50]
    assert [i.number_of_sectors for i in infos] == [40, 7]
    assert [i.partition_length for i in infos] == [512 * 40, 512 * 7]
    assert all(i.is_partition and i.drive == 1 for i in infos)


def test_partitions_keep_empty_entries_by_default():
    entries = [LayoutEntry(0, 0), LayoutEntry(512, 1024)]
    infos = partitions_from_layout(0, _geometry(), entries)
    assert len(infos) == 2


def test_skip_empty_keeps_table_index():
    entries = [LayoutEntry(0, 0), LayoutEntry(512, 1024), LayoutEntry(0, 0), LayoutEntry(2048, 512)]
    infos = partitions_from_layout(0, _geometry(), entries, skip_empty=True)
    assert [i.partition for i in infos] == [1, 3]


def test_partitions_need_positive_sector_size():
    geometry = DiskGeometry(1, 1, 1, 0)
    with pytest.raises(ValueError):
        partitions_from_layout(0, geometry, [LayoutEntry(0, 512)])


def test_name_for_partition_is_one_based():
    info = PartitionInfo(
        drive=0, partition=2, is_partition=True, bytes_per_sector=512,
        number_of_sectors=2048, starting_offset=0, starting_sector=0,
        partition_length=MB,
    )
    name = info.name_as_string()
    assert "1" in name and "3" in name
    assert info.size_as_string() in name
    assert info.size_as_string() == format_size(MB)


def test_name_for_drive_omits_partition():
    drive = whole_drive_info(4, _geometry(), False)
    part = whole_drive_info(4, _geometry(), True)
    assert "5" in drive.name_as_string()
    assert drive.name_as_string() != part.name_as_string()
    assert drive.size_as_string() in drive.name_as_string()