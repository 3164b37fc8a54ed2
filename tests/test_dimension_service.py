import pytest

from hex2bmp.services.dimension_service import COMMON_RESOLUTIONS, DimensionResolver


@pytest.mark.parametrize(
    "count, expected",
    [
        (64, (8, 8)),
        (4096, (64, 64)),
        (16384, (128, 128)),
        (20480, (128, 160)),
        (76800, (320, 240)),
        (8192, (128, 64)),
        (6144, (96, 64)),
        (1, (1, 1)),
        (2, (2, 1)),
        (7, (7, 1)),
        (100, (10, 10)),
    ],
)
def test_resolve(count, expected):
    assert DimensionResolver().resolve(count) == expected


def test_table_matches_come_first():
    candidates = DimensionResolver().candidates(20480)
    assert candidates[:2] == [(128, 160), (160, 128)]


def test_product_always_matches():
    resolver = DimensionResolver()
    for count in range(1, 600):
        width, height = resolver.resolve(count)
        assert width >= 1 and height >= 1
        assert width * height == count


def test_table_entries_resolve_to_a_table_entry():
    resolver = DimensionResolver()
    for width, height in COMMON_RESOLUTIONS:
        assert resolver.resolve(width * height) in COMMON_RESOLUTIONS


def test_custom_table():
    assert DimensionResolver(resolutions=((4, 2),)).resolve(8) == (4, 2)


def test_non_positive_count_rejected():
    with pytest.raises(ValueError):
        DimensionResolver().resolve(0)
