# tests/conftest.py
from __future__ import annotations

import pytest


# (ppp, modbus, input)
GOLDEN = [
    (0x0000, 0xFFFF, ""),
    (0x82F7, 0xA87E, "a"),
    (0x33DE, 0xC9A9, "ab"),
    (0x9E25, 0x5749, "abc"),
    (0xA36B, 0x1D97, "abcd"),
    (0x19A5, 0x859C, "abcde"),
    (0x04F6, 0x4305, "abcdef"),
    (0x757C, 0xE9C2, "abcdefg"),
    (0xA6A8, 0x7F69, "abcdefgh"),
    (0x275B, 0x007F, "abcdefghi"),
    (0xD055, 0xCFC1, "abcdefghij"),
    (0x7025, 0x21A5, "Discard medicine more than two years old."),
    (0x2BE0, 0x70E7, "He who has a shady past knows that nice guys finish last."),
    (0x81D3, 0x1974, "I wouldn't marry him with a ten foot pole."),
    (0xF471, 0xC315, "Free! Free!/A trip/to Mars/for 900/empty jars/Burma Shave"),
    (0xDC73, 0x0EAB, "The days of the digital watch are numbered.  -Tom Stoppard"),
    (0x6A62, 0xA782, "Nepal premier won't resign."),
    (0xD860, 0x9201, "For every action there is an equal and opposite government program."),
    (0xEE04, 0xEFAF, "His money is twice tainted: 'taint yours and 'taint mine."),
    (0x1687, 0xAC2A, "There is no reason for any individual to have a computer in their home. -Ken Olsen, 1977"),
    (0x497D, 0xAD2E, "It's a tiny change to the code and not completely disgusting. - Bob Manchek"),
    (0x0073, 0x9205, "size:  a.out:  bad magic"),
    (0xCCB3, 0xD7D3, "The major problem is with sendmail.  -Mark Horton"),
    (0x9464, 0x39A3, "Give me a rock, paper and scissors and I will move the world.  CCFestoon"),
    (0x318E, 0x24FD, "If the enemy is within range, then so are you."),
    (0x2CBB, 0xC7CF, "It's well we cannot hear the screams/That we create in others' dreams."),
    (0xDE8B, 0x1F3B, "You remind me of a TV show, but that's all right: I watch it anyway."),
    (0xFE32, 0x86C7, "C is as portable as Stonehedge!!"),
    (0x9186, 0xB89A, "Even if I could be Shakespeare, I think I should still choose to be Faraday. - A. Huxley"),
    (0xD304, 0xEE28, "The fugacity of a constituent in a mixture of gases at a given temperature is proportional to its mole fraction.  Lewis-Randall Rule"),
    (0xFD73, 0xB025, "How can you write a big system without C++?  -Paul Glick"),
]


@pytest.fixture
def check_input() -> bytes:
    """
    Standard CRC catalogue check string.
    """
    return b"123456789"


@pytest.fixture(params=GOLDEN, ids=lambda g: repr(g[2][:12]))
def golden(request):
    return request.param
