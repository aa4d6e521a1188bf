import io

import pytest

from coursekit.pizza import MENU, Order, main


def test_add_returns_menu_price():
    order = Order()
    assert order.add("A") == 15.50
    assert order.add("D") == 9.75


def test_sample_order_total():
    order = Order()
    for letter in "ADC":
        order.add(letter)
    assert len(order) == 3
    assert order.total == pytest.approx(32.25)


@pytest.mark.parametrize("letter", ["S", "d", "E", ""])
def test_invalid_letter_raises_and_leaves_order_unchanged(letter):
    order = Order()
    order.add("B")
    with pytest.raises(ValueError):
        order.add(letter)
    assert order.items == ["B"]
    assert order.total == pytest.approx(MENU["B"][1])


def test_empty_order():
    order = Order()
    assert len(order) == 0
    assert order.total == 0


def test_main_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("A\nS\nd\nD\nC\nE\n"))
    assert main([]) == 0
    captured = capsys.readouterr()
    assert "Total: 32.25" in captured.out
    assert "Number of items: 3" in captured.out
    assert captured.out.endswith("Thank you! Enjoy!\n")
    assert captured.err.count("Please pick a valid option") == 2


def test_main_menu_layout(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("E\n"))
    main([])
    out = capsys.readouterr().out
    assert "\tA\tPizza" + " " * 21 + "15.50\n" in out
    assert "Welcome to Pizza Palace" in out