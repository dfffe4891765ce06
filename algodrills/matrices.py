"""Grid and matrix exercises."""

from __future__ import annotations

from typing import Sequence

Matrix = list[list[int]]


def generate(num_rows: int) -> Matrix:
    """Return the first num_rows rows of Pascal's triangle."""
    rows: Matrix = []
    for i in range(num_rows):
        row = [1] * (i + 1)
        if i > 1:
            previous = rows[-1]
            row[1:-1] = [a + b for a, b in zip(previous, previous[1:])]
        rows.append(row)
    return rows


def lucky_numbers(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Values that are the minimum of their row and maximum of their column."""
    row_mins = [min(row) for row in matrix]
    result = []
    for column in zip(*matrix):
        best_row = max(range(len(column)), key=lambda r: (column[r], -r))
        if row_mins[best_row] == column[best_row]:
            result.append(column[best_row])
    return result


def construct_2d_array(original: Sequence[int], m: int, n: int) -> Matrix:
    """Reshape original into m rows of n, or return [] if sizes disagree."""
    if m * n != len(original):
        return []
    return [list(original[i * n:(i + 1) * n]) for i in range(m)]


def rotate_matrix(matrix: Matrix) -> None:
    """Rotate a square matrix a quarter turn clockwise, in place."""
    size = len(matrix)
    for i in range(size):
        for j in range(i + 1, size):
            matrix[i][j], matrix[j][i] = matrix[j][i], matrix[i][j]
    for row in matrix:
        row.reverse()


def generate_matrix(n: int) -> Matrix:
    """Fill an n-by-n matrix with 1..n*n in clockwise spiral order."""
    grid = [[0] * n for _ in range(n)]
    top, bottom, left, right = 0, n - 1, 0, n - 1
    count = 1
    direction = 0
    while count <= n * n:
        if direction == 0:
            for col in range(left, right + 1):
                grid[top][col] = count
                count += 1
            top += 1
        elif direction == 1:
            for row in range(top, bottom + 1):
                grid[row][right] = count
                count += 1
            right -= 1
        elif direction == 2:
            for col in range(right, left - 1, -1):
                grid[bottom][col] = count
                count += 1
            bottom -= 1
        else:
            for row in range(bottom, top - 1, -1):
                grid[row][left] = count
                count += 1
            left += 1
        direction = (direction + 1) % 4
    return grid


def set_zeroes(matrix: Matrix) -> None:
    """Zero every row and column that holds a zero, in place."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        for j in range(len(row)):
            if i in zero_rows or j in zero_cols:
                row[j] = 0


def _is_magic(grid: Sequence[Sequence[int]], r: int, c: int) -> bool:
    block = [list(grid[i][c:c + 3]) for i in range(r, r + 3)]
    values = [v for row in block for v in row]
    if len(set(values)) != 9 or any(v < 1 or v > 9 for v in values):
        return False
    if any(sum(row) != 15 for row in block):
        return False
    if any(sum(col) != 15 for col in zip(*block)):
        return False
    diagonal = block[0][0] + block[1][1] + block[2][2]
    anti_diagonal = block[2][0] + block[1][1] + block[0][2]
    return diagonal == 15 and anti_diagonal == 15


def num_magic_squares_inside(grid: Sequence[Sequence[int]]) -> int:
    """Count 3x3 sub-grids that are magic squares of the numbers 1..9."""
    rows = len(grid)
    cols = len(grid[0]) if grid else 0
    return sum(
        _is_magic(grid, r, c)
        for r in range(rows - 2)
        for c in range(cols - 2)
    )