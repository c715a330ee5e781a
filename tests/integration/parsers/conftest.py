from pathlib import Path

import pytest

RIGHTMOVE_FIELDS = [
    "AGENT_REF",
    "ADDRESS_1",
    "POSTCODE1",
    "PRICE",
    "PROP_SUB_ID",
    "SUMMARY",
    "DESCRIPTION",
]

RIGHTMOVE_ROWS = [
    [
        "AG01_1001",
        "12 Station Road",
        "SW1A",
        "425000",
        "1",
        "Two bedroom flat: close to the station",
        "<p>Bright flat, recently refurbished.</p>",
    ],
    [
        "AG01_1002",
        "Flat 4, Mill House",
        "M1",
        "180000",
        "2",
        "Studio apartment",
        "",
    ],
    [
        "AG01_1003",
        "The Old Barn",
        "BA1",
        "950000",
        "4",
        "Barn conversion",
        "Detached barn with five acres.",
    ],
]


def _write_rightmove_feed(path: Path) -> None:
    """Writes a feed in the common Rightmove layout ('^' fields, '~' records)."""
    lines = [
        "#HEADER#",
        "Version : 3",
        "EOF : '^'",
        "EOR : '~'",
        f"Property Count : {len(RIGHTMOVE_ROWS)}",
        "Generated Date : 2024-03-01 09:15:00",
        "",
        "#DEFINITION#",
        "^".join(RIGHTMOVE_FIELDS) + "^~",
        "",
        "#DATA#",
    ]
    lines.extend("^".join(row) + "^~" for row in RIGHTMOVE_ROWS)
    lines.append("#END#")
    path.write_text("\r\n".join(lines) + "\r\n", encoding="utf-8")


def _write_minimal_feed(path: Path) -> None:
    path.write_text(
        "#HEADER#\nEOF:|\nEOR:;\n"
        "#DEFINITION#\nname|address|price;\n"
        "#DATA#\nAlice|123 Rd|100000|;\n#END#\n"
    )


def _write_mismatched_feed(path: Path) -> None:
    path.write_text(
        "#HEADER#\nEOF:|\nEOR:;\n"
        "#DEFINITION#\nname|address|price;\n"
        "#DATA#\nAlice|123 Rd|100000|;\nBob|9 Lane|;\n#END#\n"
    )


def _write_no_delimiters_feed(path: Path) -> None:
    path.write_text(
        "#HEADER#\nVersion:3\n"
        "#DEFINITION#\nname|address|price;\n"
        "#DATA#\nAlice|123 Rd|100000|;\n#END#\n"
    )


@pytest.fixture(scope="module")
def feed_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Create all test feeds once per module."""
    dir_path: Path = tmp_path_factory.mktemp("feeds")

    _write_rightmove_feed(dir_path / "rightmove.BLM")
    _write_minimal_feed(dir_path / "minimal.blm")
    _write_mismatched_feed(dir_path / "mismatched.blm")
    _write_no_delimiters_feed(dir_path / "no_delimiters.blm")
    _write_minimal_feed(dir_path / "minimal.txt")

    return dir_path


@pytest.fixture(scope="module")
def rightmove_fields() -> list[str]:
    return list(RIGHTMOVE_FIELDS)


@pytest.fixture(scope="module")
def rightmove_rows() -> list[list[str]]:
    return [list(row) for row in RIGHTMOVE_ROWS]
