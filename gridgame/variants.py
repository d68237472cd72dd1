from dataclasses import dataclass

from .errors import InvariantViolation


@dataclass(frozen=True)
class Variant:
    """
    one fixed board configuration
    """
    name: str
    board_size: int     # cells per side
    run_length: int     # marks in a row needed to win
    title: str

    @property
    def cell_count(self):
        return self.board_size * self.board_size


CLASSIC = Variant("classic", 3, 3, "Tic-Tac-Toe")
CONNECT_FIVE = Variant("connect-five", 5, 5, "Connect Five")

VARIANTS = {v.name: v for v in (CLASSIC, CONNECT_FIVE)}


def get_variant(name):
    """
    look up a variant by name
    """
    try:
        return VARIANTS[name]
    except KeyError:
        raise InvariantViolation(f"unknown variant {name!r}") from None


def variant_for(board_size, run_length):
    """
    look up a variant by (size, run length); only the fixed pairs exist
    """
    for v in VARIANTS.values():
        if v.board_size == board_size and v.run_length == run_length:
            return v
    raise InvariantViolation(
        f"unsupported board configuration: size={board_size}, run_length={run_length}"
    )
