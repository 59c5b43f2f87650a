import pytest

from filelink.sizes import approximate_size


@pytest.mark.parametrize(
    ("length", "expected"),
    [
        (0, "0 bytes"),
        (1, "1 byte"),
        (1023, "1023 bytes"),
        (1024, "1.0 KB"),
        (1536, "1.5 KB"),
        (4300, "4.2 KB"),
        (102_348, "99.9 KB"),
        (102_359, "100 KB"),
        (102_400, "100 KB"),
        (1_048_575, "1.0 MB"),
        (1024**2, "1.0 MB"),
        (5 * 1024**3 + 1024**3 // 4, "5.3 GB"),
        (1024**6, "1.0 EB"),
        (1024**7, "1024 EB"),
    ],
)
def test_approximate_size(length: int, expected: str) -> None:
    assert approximate_size(length) == expected


def test_approximate_size_rejects_negative() -> None:
    with pytest.raises(ValueError):
        approximate_size(-1)
