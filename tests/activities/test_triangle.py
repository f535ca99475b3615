"""Tests for the triangle printer."""
import pytest

from activity_system.activities.triangle import TriangleActivity, inverted_triangle, right_triangle


def test_right_triangle():
    assert right_triangle(3) == ["*", "**", "***"]
    assert right_triangle(1) == ["*"]


def test_inverted_triangle():
    assert inverted_triangle(3) == ["***", "**", "*"]


@pytest.mark.parametrize("height", [1, 7, 20])
def test_triangles_mirror_each_other(height):
    assert inverted_triangle(height) == list(reversed(right_triangle(height)))
    assert len(right_triangle(height)[-1]) == height


def test_run_right_then_exit(make_validator, console, read_output):
    activity = TriangleActivity(make_validator("1\n3\n\n4\n"), console)
    activity.run()

    output = read_output()
    assert "Right Triangle:" in output
    assert "Inverted Triangle:" not in output
    assert "***" in output
    assert "Exiting Triangle Activity..." in output


def test_run_both(make_validator, console, read_output):
    TriangleActivity(make_validator("3 2\n\n4\n"), console).run()

    output = read_output()
    assert "Right Triangle:" in output
    assert "Inverted Triangle:" in output


def test_height_out_of_range(make_validator, console, read_output):
    TriangleActivity(make_validator("2\n25\n0\n2\n\n4\n"), console).run()

    output = read_output()
    assert output.count("[ERROR] Choice must be 1-20. Try again.") == 2
    assert "Inverted Triangle:" in output
