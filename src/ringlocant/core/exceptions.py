"""Errors raised while numbering fused ring systems."""


class NumberingError(ValueError):
    """Numbering of a fused ring system could not be completed.

    Raised for malformed ring adjacency data, unsupported ring sizes,
    missing terminal rings, orientation rules that leave no candidate and
    atom walks that exceed their iteration bound. Callers are expected to
    abandon the current structure and fall back or try another parse.
    """

    pass
