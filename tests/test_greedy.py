import pytest

from dsakit.greedy import coin_change, lottery_bills, min_refills


def test_min_refills_source_example():
    assert min_refills(950, 400, [200, 375, 550, 750]) == 2


def test_min_refills_unreachable():
    with pytest.raises(ValueError):
        min_refills(10, 3, [1, 2, 5, 9])


def test_min_refills_no_stop_needed():
    assert min_refills(300, 400, [100, 200]) == 0


def test_min_refills_never_exceeds_station_count():
    stops = [100, 200, 300, 400, 500]
    assert 0 <= min_refills(600, 150, stops) <= len(stops)


def test_coin_change_source_example():
    assert coin_change(17) == 4


@pytest.mark.parametrize("coin", [1, 5, 10])
def test_coin_change_single_coin(coin):
    assert coin_change(coin) == 1


@pytest.mark.parametrize("amount", range(0, 40))
def test_coin_change_adding_ten_adds_one(amount):
    assert coin_change(amount + 10) == coin_change(amount) + 1


def test_coin_change_negative():
    with pytest.raises(ValueError):
        coin_change(-1)


@pytest.mark.parametrize("bill", [1, 5, 10, 20, 100])
def test_lottery_single_bill(bill):
    assert lottery_bills(bill) == 1


@pytest.mark.parametrize("amount", range(0, 120, 7))
def test_lottery_adding_hundred_adds_one(amount):
    assert lottery_bills(amount + 100) == lottery_bills(amount) + 1


def test_lottery_zero():
    assert lottery_bills(0) == 0


def test_lottery_negative():
    with pytest.raises(ValueError):
        lottery_bills(-5)