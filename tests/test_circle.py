import io
import math

import pytest

from coursekit.circle import circumference, main


def test_sample_value():
    assert format(circumference(3.21), "g") == "20.169"


@pytest.mark.parametrize("radius", [0, -2.2, -1])
def test_non_positive_radius_raises(radius):
    with pytest.raises(ValueError):
        circumference(radius)


@pytest.mark.parametrize("radius", [0.5, 1.0, 7.25, 100.0])
def test_proportional_to_radius(radius):
    assert circumference(radius) / radius == pytest.approx(2 * math.pi, rel=1e-6)


def test_main_reprompts_until_positive(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n-2.2\n3.21\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("Please enter a positive radius:") == 3
    assert "You entered the radius: 3.21" in out
    assert "The circumference of the circle: 20.169" in out
    assert out.endswith("Have A Great Day!\n")


def test_main_with_argument(capsys):
    assert main(["3.21"]) == 0
    assert "20.169" in capsys.readouterr().out


def test_main_rejects_negative_argument(capsys):
    assert main(["-1"]) == 2
    assert "invalid radius" in capsys.readouterr().err