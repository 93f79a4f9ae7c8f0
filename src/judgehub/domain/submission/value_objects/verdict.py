from enum import IntEnum


class Verdict(IntEnum):
    """Judge result codes as stored in the solution table."""

    WT0 = 0  # waiting
    WT1 = 1  # waiting for rejudge
    CI = 2  # compiling
    RI = 3  # running
    AC = 4
    PE = 5
    WA = 6
    TL = 7
    ML = 8
    OL = 9
    RE = 10
    CE = 11
    SE = 12
    NT = 13  # no test data

    @classmethod
    def from_code(cls, code: int) -> "Verdict | None":
        """Return the verdict for a stored code, or None if it is unknown."""
        try:
            return cls(code)
        except ValueError:
            return None
