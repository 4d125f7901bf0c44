"""Modular matrix multiplication and powers, for linear recurrences."""

DEFAULT_MODULUS = 98765431

Matrix = list[list[int]]


def _rem(x: int, m: int) -> int:
    """Remainder whose sign follows the dividend."""
    r = abs(x) % abs(m)
    return -r if x < 0 else r


def _shape(matrix: Matrix, name: str) -> tuple[int, int]:
    if not matrix or not matrix[0]:
        raise ValueError(f"{name} must be a non-empty matrix")
    cols = len(matrix[0])
    if any(len(row) != cols for row in matrix):
        raise ValueError(f"{name} rows have differing lengths")
    return len(matrix), cols


def mat_mul(a: Matrix, b: Matrix, modulus: int = DEFAULT_MODULUS) -> Matrix:
    """Return the product ``a @ b`` with every entry reduced by ``modulus``."""
    _, inner = _shape(a, "a")
    rows_b, _ = _shape(b, "b")
    if inner != rows_b:
        raise ValueError(
            f"cannot multiply: a has {inner} columns, b has {rows_b} rows"
        )
    columns = list(zip(*b))
    result = []
    for row in a:
        out_row = []
        for column in columns:
            total = 0
            for x, y in zip(row, column):
                total = _rem(total + _rem(x * y, modulus), modulus)
            out_row.append(total)
        result.append(out_row)
    return result


def mat_pow(a: Matrix, power: int, modulus: int = DEFAULT_MODULUS) -> Matrix:
    """Return ``a`` raised to ``power`` (at least 1) by repeated squaring.

    A power of 1 returns a copy of ``a`` unreduced.
    """
    rows, cols = _shape(a, "a")
    if rows != cols:
        raise ValueError("only square matrices can be raised to a power")
    if power < 1:
        raise ValueError(f"power must be at least 1, got {power}")
    if power == 1:
        return [list(row) for row in a]
    if power % 2:
        return mat_mul(a, mat_pow(a, power - 1, modulus), modulus)
    half = mat_pow(a, power // 2, modulus)
    return mat_mul(half, half, modulus)