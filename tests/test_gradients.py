"""
Gradient pixel arrays used for the background and health bars
"""
import numpy as np

from game.duel.gradients import linear_gradient


class TestLinearGradient:

    def test_shape_and_dtype(self):
        pixels = linear_gradient(8, 4, (0, 0, 0), (255, 255, 255))
        assert pixels.shape == (4, 8, 4)
        assert pixels.dtype == np.uint8

    def test_vertical_runs_top_to_bottom(self):
        pixels = linear_gradient(3, 5, (10, 10, 10), (34, 34, 34))
        assert tuple(pixels[0, 0]) == (10, 10, 10, 255)
        assert tuple(pixels[-1, 2]) == (34, 34, 34, 255)
        assert tuple(pixels[2, 0]) == (22, 22, 22, 255)
        # Each row is a single colour
        assert (pixels[1] == pixels[1, 0]).all()

    def test_horizontal_runs_left_to_right(self):
        pixels = linear_gradient(60, 10, (0, 255, 0), (0, 128, 0), horizontal=True)
        assert tuple(pixels[0, 0]) == (0, 255, 0, 255)
        assert tuple(pixels[9, -1]) == (0, 128, 0, 255)
        assert (pixels[:, 30] == pixels[0, 30]).all()

    def test_rgba_alpha_is_kept(self):
        pixels = linear_gradient(2, 2, (255, 0, 0, 0), (255, 0, 0, 200))
        assert pixels[0, 0, 3] == 0
        assert pixels[1, 0, 3] == 200
