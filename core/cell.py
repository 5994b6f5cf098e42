from dataclasses import dataclass, field

from core.constants import DIGITS, EMPTY


@dataclass
class Cell:
    """
    Single position of the grid.

    fixed=True  -> value holds the digit, candidates is empty.
    fixed=False -> value is EMPTY, candidates holds the digits not yet ruled out.
    """
    fixed: bool = False
    value: int = EMPTY
    candidates: set = field(default_factory=lambda: set(DIGITS))

    @classmethod
    def given(cls, value):
        if value not in DIGITS:
            raise ValueError(f"Given value must be one of {DIGITS}, got {value!r}")
        return cls(fixed=True, value=value, candidates=set())

    def eliminate(self, digit):
        # no-op when the digit is already gone
        self.candidates.discard(digit)

    def has_candidate(self, digit):
        return digit in self.candidates

    def fix(self, digit):
        self.fixed = True
        self.value = digit
        self.candidates.clear()

    def copy(self):
        return Cell(self.fixed, self.value, set(self.candidates))
