import pytest

from algokit.coin_change import coin_ways_bottom_up, coin_ways_top_down


def test_worked_example():
    assert coin_ways_top_down(3, [1, 2, 3, 8]) == 4
    assert coin_ways_bottom_up(3, [1, 2, 3, 8]) == 4


def test_zero_amount_has_one_way():
    assert coin_ways_top_down(0, [1, 2, 3, 8]) == 1
    assert coin_ways_bottom_up(0, [1, 2, 3, 8]) == 1
    assert coin_ways_top_down(0, []) == 1
    assert coin_ways_bottom_up(0, []) == 1


def test_single_unit_coin():
    for amount in range(20):
        assert coin_ways_top_down(amount, [1]) == 1
        assert coin_ways_bottom_up(amount, [1]) == 1


def test_no_coins_no_ways():
    assert coin_ways_top_down(5, []) == 0
    assert coin_ways_bottom_up(5, []) == 0


@pytest.mark.parametrize("amount", range(0, 60, 7))
@pytest.mark.parametrize("coins", [[1, 2, 3, 8], [2, 5], [3, 7, 11], [1, 4]])
def test_both_methods_agree(amount, coins):
    assert coin_ways_top_down(amount, coins) == coin_ways_bottom_up(amount, coins)


def test_coin_order_irrelevant():
    assert coin_ways_top_down(17, [1, 2, 3, 8]) == coin_ways_top_down(17, [8, 3, 2, 1])
    assert coin_ways_bottom_up(17, [1, 2, 3, 8]) == coin_ways_bottom_up(17, [8, 3, 2, 1])


def test_unreachable_amount():
    assert coin_ways_top_down(7, [2, 4]) == 0
    assert coin_ways_bottom_up(7, [2, 4]) == 0


def test_ordered_compositions_recurrence():
    coins = [1, 2]
    for amount in range(2, 25):
        assert coin_ways_top_down(amount, coins) == coin_ways_top_down(
            amount - 1, coins
        ) + coin_ways_top_down(amount - 2, coins)
        assert coin_ways_bottom_up(amount, coins) == coin_ways_bottom_up(
            amount - 1, coins
        ) + coin_ways_bottom_up(amount - 2, coins)


def test_negative_amount_rejected():
    with pytest.raises(ValueError):
        coin_ways_top_down(-1, [1])
    with pytest.raises(ValueError):
        coin_ways_bottom_up(-1, [1])


def test_non_positive_coin_rejected():
    with pytest.raises(ValueError):
        coin_ways_top_down(3, [1, 0])
    with pytest.raises(ValueError):
        coin_ways_bottom_up(3, [1, 0])