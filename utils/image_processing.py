import os

import cv2
import numpy as np

from models.grid import BOX_SIZE, GRID_SIZE


GIVEN_COLOR = (255, 0, 0)  # blue
FILLED_COLOR = (0, 150, 0)  # green
LINE_COLOR = (0, 0, 0)


def render_grid_image(original_grid, solution_grid, cell_size=50):
    """Draw the solution on a white canvas.

    Digits that were given in the puzzle are drawn in blue, digits found by
    the solver in green. Box borders are drawn thicker than cell borders.
    """
    size = GRID_SIZE * cell_size
    image = np.ones((size, size, 3), dtype=np.uint8) * 255

    # Draw grid lines
    for i in range(GRID_SIZE + 1):
        thickness = 3 if i % BOX_SIZE == 0 else 1
        cv2.line(image, (i * cell_size, 0), (i * cell_size, size), LINE_COLOR, thickness)
        cv2.line(image, (0, i * cell_size), (size, i * cell_size), LINE_COLOR, thickness)

    # Draw numbers
    font_scale = cell_size / 62.5
    for i in range(GRID_SIZE):
        for j in range(GRID_SIZE):
            digit = int(solution_grid[i][j])
            if digit == 0:
                continue

            x = j * cell_size + cell_size // 2
            y = i * cell_size + cell_size // 2
            color = GIVEN_COLOR if original_grid[i][j] != 0 else FILLED_COLOR

            cv2.putText(image, str(digit), (x - cell_size // 5, y + cell_size // 5),
                        cv2.FONT_HERSHEY_SIMPLEX, font_scale, color, 2)

    return image


def save_grid_image(path, original_grid, solution_grid, cell_size=50):
    """Render the solution and write it to path, creating the directory if needed"""
    directory = os.path.dirname(path)
    if directory and not os.path.exists(directory):
        os.makedirs(directory)

    image = render_grid_image(original_grid, solution_grid, cell_size)
    if not cv2.imwrite(path, image):
        raise OSError(f"Could not write image to {path}")
    return path
