import math


def round_half_up(value: float) -> int:
    """Округление до целого, половины - вверх (2.5 -> 3, -2.5 -> -2).

    Встроенный round() округляет половины к чётному.
    """
    return math.floor(value + 0.5)
