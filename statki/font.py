"""8x16 bitmap fonts covering printable ASCII."""

from __future__ import annotations

from enum import IntEnum

GLYPH_HEIGHT = 16
GLYPH_WIDTH = 8
FIRST_CHAR = 0x20
LAST_CHAR = 0x7E


class Font(IntEnum):
    MS_GOTHIC = 0
    SYSTEM = 1


def _parse(table: str) -> tuple[bytes, ...]:
    glyphs = tuple(bytes.fromhex(line) for line in table.split("\n") if line.strip())
    if len(glyphs) != LAST_CHAR - FIRST_CHAR + 1:
        raise ValueError("font table has the wrong number of glyphs")
    if any(len(g) != GLYPH_HEIGHT for g in glyphs):
        raise ValueError("font table has a glyph of the wrong height")
    return glyphs


_MS_GOTHIC = _parse("""
00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00
00 10 10 10 10 10 10 10 10 10 00 00 18 18 00 00
36 24 48 00 00 00 00 00 00 00 00 00 00 00 00 00
00 24 24 24 24 FE 48 48 48 48 FC 48 48 48 48 00
10 38 54 92 92 50 30 18 14 12 92 92 54 38 10 00
00 62 92 94 94 68 08 10 20 2C 52 52 92 8C 00 00
00 30 48 48 48 48 30 20 54 94 88 88 94 62 00 00
30 30 10 20 00 00 00 00 00 00 00 00 00 00 00 00
04 08 10 10 20 20 20 20 20 20 20 10 10 08 04 00
40 20 10 10 08 08 08 08 08 08 08 10 10 20 40 00
00 00 00 10 92 54 38 10 38 54 92 10 00 00 00 00
00 00 00 00 10 10 10 FE 10 10 10 00 00 00 00 00
00 00 00 00 00 00 00 00 00 00 00 30 30 10 20 00
00 00 00 00 00 00 00 7C 00 00 00 00 00 00 00 00
00 00 00 00 00 00 00 00 00 00 00 00 30 30 00 00
00 02 02 04 04 08 08 10 20 20 40 40 80 80 00 00
00 30 48 84 84 84 84 84 84 84 84 84 48 30 00 00
00 10 70 10 10 10 10 10 10 10 10 10 10 10 00 00
00 30 48 84 84 04 08 08 10 20 20 40 80 FC 00 00
00 30 48 84 84 04 08 30 08 04 84 84 48 30 00 00
00 08 08 18 18 28 28 48 48 88 FC 08 08 08 00 00
00 FC 80 80 80 B0 C8 84 04 04 04 84 48 30 00 00
00 30 48 84 84 80 B0 C8 84 84 84 84 48 30 00 00
00 FC 04 04 08 08 08 10 10 10 20 20 20 20 00 00
00 30 48 84 84 84 48 30 48 84 84 84 48 30 00 00
00 30 48 84 84 84 84 4C 34 04 84 84 48 30 00 00
00 00 00 00 00 30 30 00 00 00 00 30 30 00 00 00
00 00 00 00 00 30 30 00 00 00 00 30 30 10 20 00
00 00 04 08 10 20 40 80 40 20 10 08 04 00 00 00
00 00 00 00 00 7C 00 00 00 7C 00 00 00 00 00 00
00 00 80 40 20 10 08 04 08 10 20 40 80 00 00 00
00 30 48 84 84 04 08 10 20 20 00 00 30 30 00 00
00 38 44 82 9A AA AA AA AA AA 9C 80 42 3C 00 00
00 10 10 28 28 28 28 44 44 44 7C 82 82 82 00 00
00 F8 84 82 82 82 84 F8 84 82 82 82 84 F8 00 00
00 38 44 82 82 80 80 80 80 80 82 82 44 38 00 00
00 F8 84 82 82 82 82 82 82 82 82 82 84 F8 00 00
00 FE 80 80 80 80 80 FC 80 80 80 80 80 FE 00 00
00 FE 80 80 80 80 80 FC 80 80 80 80 80 80 00 00
00 38 44 82 82 80 80 80 8E 82 82 82 46 3A 00 00
00 82 82 82 82 82 82 FE 82 82 82 82 82 82 00 00
00 38 10 10 10 10 10 10 10 10 10 10 10 38 00 00
00 04 04 04 04 04 04 04 04 04 84 84 48 30 00 00
00 82 84 84 88 90 90 A0 D0 88 88 84 82 82 00 00
00 80 80 80 80 80 80 80 80 80 80 80 80 FE 00 00
00 82 82 C6 C6 C6 C6 AA AA AA AA 92 92 92 00 00
00 82 82 C2 C2 A2 A2 92 92 8A 8A 86 86 82 00 00
00 38 44 82 82 82 82 82 82 82 82 82 44 38 00 00
00 F8 84 82 82 82 84 F8 80 80 80 80 80 80 00 00
00 38 44 82 82 82 82 82 82 82 92 8A 44 3A 00 00
00 F8 84 82 82 82 84 F8 88 88 84 84 82 82 00 00
00 38 44 82 82 80 60 18 04 02 82 82 44 38 00 00
00 FE 10 10 10 10 10 10 10 10 10 10 10 10 00 00
00 82 82 82 82 82 82 82 82 82 82 82 44 38 00 00
00 82 82 82 44 44 44 44 28 28 28 10 10 10 00 00
00 92 92 92 92 AA AA AA AA 44 44 44 44 44 00 00
00 82 82 44 44 28 28 10 28 28 44 44 82 82 00 00
00 82 82 44 44 28 28 10 10 10 10 10 10 10 00 00
00 FE 02 04 04 08 08 10 20 20 40 40 80 FE 00 00
7C 40 40 40 40 40 40 40 40 40 40 40 40 40 7C 00
00 82 82 44 44 28 28 7C 10 10 7C 10 10 10 00 00
7C 04 04 04 04 04 04 04 04 04 04 04 04 04 7C 00
10 28 44 00 00 00 00 00 00 00 00 00 00 00 00 00
00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 FF
30 30 10 20 00 00 00 00 00 00 00 00 00 00 00 00
00 00 00 00 00 00 78 84 04 3C 44 84 8C 76 00 00
00 80 80 80 80 80 B8 C4 82 82 82 82 C4 B8 00 00
00 00 00 00 00 00 3C 42 80 80 80 80 42 3C 00 00
00 02 02 02 02 02 3A 46 82 82 82 82 46 3A 00 00
00 00 00 00 00 00 38 44 82 FE 80 80 42 3C 00 00
00 18 20 20 20 20 F8 20 20 20 20 20 20 20 00 00
00 00 00 00 00 00 3A 44 44 38 40 7C 82 82 7C 00
00 80 80 80 80 80 B8 C4 82 82 82 82 82 82 00 00
00 00 10 10 00 00 10 10 10 10 10 10 10 10 00 00
00 00 10 10 00 00 10 10 10 10 10 10 10 10 60 00
00 80 80 80 80 80 84 88 90 A0 D0 88 84 82 00 00
00 10 10 10 10 10 10 10 10 10 10 10 10 10 00 00
00 00 00 00 00 00 AC D2 92 92 92 92 92 92 00 00
00 00 00 00 00 00 B8 C4 82 82 82 82 82 82 00 00
00 00 00 00 00 00 38 44 82 82 82 82 44 38 00 00
00 00 00 00 00 00 B8 C4 82 82 82 C4 B8 80 80 00
00 00 00 00 00 00 3A 46 82 82 82 46 3A 02 02 00
00 00 00 00 00 00 2E 30 20 20 20 20 20 20 00 00
00 00 00 00 00 00 7C 82 80 60 1C 02 82 7C 00 00
00 00 20 20 20 20 F8 20 20 20 20 20 20 18 00 00
00 00 00 00 00 00 82 82 82 82 82 82 46 3A 00 00
00 00 00 00 00 00 82 82 44 44 28 28 10 10 00 00
00 00 00 00 00 00 92 92 92 AA AA 44 44 44 00 00
00 00 00 00 00 00 82 44 28 10 10 28 44 82 00 00
00 00 00 00 00 00 82 82 44 44 28 28 10 20 C0 00
00 00 00 00 00 00 FE 04 08 10 20 40 80 FE 00 00
1C 10 10 10 10 10 10 20 10 10 10 10 10 10 1C 00
10 10 10 10 10 10 10 10 10 10 10 10 10 10 10 10
70 10 10 10 10 10 10 08 10 10 10 10 10 10 70 00
64 98 00 00 00 00 00 00 00 00 00 00 00 00 00 00
""")

_SYSTEM = _parse("""
00 00 00 00 00 00 00 00 00 00 00 00 00 00 00 00
00 00 00 18 3C 3C 3C 18 18 00 18 18 00 00 00 00
00 00 00 66 66 66 00 00 00 00 00 00 00 00 00 00
00 00 00 36 36 7F 36 36 36 7F 36 36 00 00 00 00
00 18 18 3C 66 60 30 18 0C 06 66 3C 18 18 00 00
00 00 70 D8 DA 76 0C 18 30 6E 5B 1B 0E 00 00 00
00 00 00 38 6C 6C 38 60 6F 66 66 3B 00 00 00 00
00 00 00 18 18 18 00 00 00 00 00 00 00 00 00 00
00 00 00 0C 18 18 30 30 30 30 30 18 18 0C 00 00
00 00 00 30 18 18 0C 0C 0C 0C 0C 18 18 30 00 00
00 00 00 00 00 36 1C 7F 1C 36 00 00 00 00 00 00
00 00 00 00 00 18 18 7E 18 18 00 00 00 00 00 00
00 00 00 00 00 00 00 00 00 00 1C 1C 0C 18 00 00
00 00 00 00 00 00 00 7E 00 00 00 00 00 00 00 00
00 00 00 00 00 00 00 00 00 00 1C 1C 00 00 00 00
00 00 00 06 06 0C 0C 18 18 30 30 60 60 00 00 00
00 00 00 1E 33 37 37 33 3B 3B 33 1E 00 00 00 00
00 00 00 0C 1C 7C 0C 0C 0C 0C 0C 0C 00 00 00 00
00 00 00 3C 66 66 06 0C 18 30 60 7E 00 00 00 00
00 00 00 3C 66 66 06 1C 06 66 66 3C 00 00 00 00
00 00 00 30 30 36 36 36 66 7F 06 06 00 00 00 00
00 00 00 7E 60 60 60 7C 06 06 0C 78 00 00 00 00
00 00 00 1C 18 30 7C 66 66 66 66 3C 00 00 00 00
00 00 00 7E 06 0C 0C 18 18 30 30 30 00 00 00 00
00 00 00 3C 66 66 76 3C 6E 66 66 3C 00 00 00 00
00 00 00 3C 66 66 66 66 3E 0C 18 38 00 00 00 00
00 00 00 00 00 1C 1C 00 00 00 1C 1C 00 00 00 00
00 00 00 00 00 1C 1C 00 00 00 1C 1C 0C 18 00 00
00 00 00 06 0C 18 30 60 30 18 0C 06 00 00 00 00
00 00 00 00 00 00 7E 00 7E 00 00 00 00 00 00 00
00 00 00 60 30 18 0C 06 0C 18 30 60 00 00 00 00
00 00 00 3C 66 66 0C 18 18 00 18 18 00 00 00 00
00 00 00 7E C3 C3 CF DB DB CF C0 7F 00 00 00 00
00 00 00 18 3C 66 66 66 7E 66 66 66 00 00 00 00
00 00 00 7C 66 66 66 7C 66 66 66 7C 00 00 00 00
00 00 00 3C 66 66 60 60 60 66 66 3C 00 00 00 00
00 00 00 78 6C 66 66 66 66 66 6C 78 00 00 00 00
00 00 00 7E 60 60 60 7C 60 60 60 7E 00 00 00 00
00 00 00 7E 60 60 60 7C 60 60 60 60 00 00 00 00
00 00 00 3C 66 66 60 60 6E 66 66 3E 00 00 00 00
00 00 00 66 66 66 66 7E 66 66 66 66 00 00 00 00
00 00 00 3C 18 18 18 18 18 18 18 3C 00 00 00 00
00 00 00 06 06 06 06 06 06 66 66 3C 00 00 00 00
00 00 00 66 66 6C 6C 78 6C 6C 66 66 00 00 00 00
00 00 00 60 60 60 60 60 60 60 60 7E 00 00 00 00
00 00 00 63 63 77 6B 6B 6B 63 63 63 00 00 00 00
00 00 00 63 63 73 7B 6F 67 63 63 63 00 00 00 00
00 00 00 3C 66 66 66 66 66 66 66 3C 00 00 00 00
00 00 00 7C 66 66 66 7C 60 60 60 60 00 00 00 00
00 00 00 3C 66 66 66 66 66 66 66 3C 0C 06 00 00
00 00 00 7C 66 66 66 7C 6C 66 66 66 00 00 00 00
00 00 00 3C 66 60 30 18 0C 06 66 3C 00 00 00 00
00 00 00 7E 18 18 18 18 18 18 18 18 00 00 00 00
00 00 00 66 66 66 66 66 66 66 66 3C 00 00 00 00
00 00 00 66 66 66 66 66 66 66 3C 18 00 00 00 00
00 00 00 63 63 63 6B 6B 6B 36 36 36 00 00 00 00
00 00 00 66 66 34 18 18 2C 66 66 66 00 00 00 00
00 00 00 66 66 66 66 3C 18 18 18 18 00 00 00 00
00 00 00 7E 06 06 0C 18 30 60 60 7E 00 00 00 00
00 00 00 3C 30 30 30 30 30 30 30 30 30 30 3C 00
00 00 00 60 60 30 30 18 18 0C 0C 06 06 00 00 00
00 00 00 3C 0C 0C 0C 0C 0C 0C 0C 0C 0C 0C 3C 00
00 18 3C 66 00 00 00 00 00 00 00 00 00 00 00 00
00 00 00 00 00 00 00 00 00 00 00 00 00 00 FF 00
00 00 00 18 18 18 00 00 00 00 00 00 00 00 00 00
00 00 00 00 00 3C 06 06 3E 66 66 3E 00 00 00 00
00 00 00 60 60 7C 66 66 66 66 66 7C 00 00 00 00
00 00 00 00 00 3C 66 60 60 60 66 3C 00 00 00 00
00 00 00 06 06 3E 66 66 66 66 66 3E 00 00 00 00
00 00 00 00 00 3C 66 66 7E 60 60 3C 00 00 00 00
00 00 00 1E 30 30 30 7E 30 30 30 30 00 00 00 00
00 00 00 00 00 3E 66 66 66 66 66 3E 06 06 7C 00
00 00 00 60 60 7C 66 66 66 66 66 66 00 00 00 00
00 00 18 18 00 78 18 18 18 18 18 7E 00 00 00 00
00 00 0C 0C 00 3C 0C 0C 0C 0C 0C 0C 0C 0C 78 00
00 00 00 60 60 66 66 6C 78 6C 66 66 00 00 00 00
00 00 00 78 18 18 18 18 18 18 18 7E 00 00 00 00
00 00 00 00 00 7E 6B 6B 6B 6B 6B 63 00 00 00 00
00 00 00 00 00 7C 66 66 66 66 66 66 00 00 00 00
00 00 00 00 00 3C 66 66 66 66 66 3C 00 00 00 00
00 00 00 00 00 7C 66 66 66 66 66 7C 60 60 60 00
00 00 00 00 00 3E 66 66 66 66 66 3E 06 06 06 00
00 00 00 00 00 66 6E 70 60 60 60 60 00 00 00 00
00 00 00 00 00 3E 60 60 3C 06 06 7C 00 00 00 00
00 00 00 30 30 7E 30 30 30 30 30 1E 00 00 00 00
00 00 00 00 00 66 66 66 66 66 66 3E 00 00 00 00
00 00 00 00 00 66 66 66 66 66 3C 18 00 00 00 00
00 00 00 00 00 63 6B 6B 6B 6B 36 36 00 00 00 00
00 00 00 00 00 66 66 3C 18 3C 66 66 00 00 00 00
00 00 00 00 00 66 66 66 66 66 66 3C 0C 18 F0 00
00 00 00 00 00 7E 06 0C 18 30 60 7E 00 00 00 00
00 00 00 0C 18 18 18 30 60 30 18 18 18 0C 00 00
00 00 00 18 18 18 18 18 18 18 18 18 18 18 18 00
00 00 00 30 18 18 18 0C 06 0C 18 18 18 30 00 00
00 00 00 71 DB 8E 00 00 00 00 00 00 00 00 00 00
""")

_TABLES = {Font.MS_GOTHIC: _MS_GOTHIC, Font.SYSTEM: _SYSTEM}


def glyph(font: Font | int, char: str | int) -> bytes:
    """The 16 row bytes of a printable ASCII character; bit 0 is the leftmost pixel drawn."""
    table = _TABLES[Font(font)]
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError("expected a single character")
        code = ord(char)
    else:
        code = char
    if not FIRST_CHAR <= code <= LAST_CHAR:
        raise ValueError(f"character code {code} has no glyph")
    return table[code - FIRST_CHAR]