import numpy as np


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round like the report expects: halves go up, not to even.

    - value: number to round (non-negative in practice)
    - ndigits: decimals to keep

    >>> round_half_up(62.5)
    63.0
    >>> round_half_up(53.845, 2)
    53.85
    """
    factor = 10.0**ndigits
    # 1e-9 absorbs binary noise such as 53.845 * 100 == 5384.499999...
    return float(np.floor(value * factor + 0.5 + 1e-9) / factor)
