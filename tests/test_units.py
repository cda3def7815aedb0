import pytest

from feeengine.units import eth_to_wei, generate_test_address, wei_to_eth_string


def test_eth_to_wei():
    assert eth_to_wei(1) == 10**18


def test_eth_to_wei_zero_and_max():
    assert eth_to_wei(0) == 0
    assert eth_to_wei(2**64 - 1) == (2**64 - 1) * 10**18


@pytest.mark.parametrize("bad", [-1, 2**64])
def test_eth_to_wei_out_of_range(bad):
    with pytest.raises(ValueError):
        eth_to_wei(bad)


def test_wei_to_eth_string():
    assert wei_to_eth_string(10**18) == "1.000000000000000000"


@pytest.mark.parametrize(
    "wei, expected",
    [
        (0, "0.000000000000000000"),
        (1, "0.000000000000000001"),
        (5 * 10**17, "0.500000000000000000"),
        (123 * 10**18 + 45, "123.000000000000000045"),
    ],
)
def test_wei_to_eth_string_values(wei, expected):
    assert wei_to_eth_string(wei) == expected


def test_wei_round_trip():
    assert wei_to_eth_string(eth_to_wei(42)) == "42.000000000000000000"


def test_wei_to_eth_string_rejects_negative():
    with pytest.raises(ValueError):
        wei_to_eth_string(-1)


def test_generate_test_address():
    addr1 = generate_test_address(1)
    addr2 = generate_test_address(2)
    assert addr1 != addr2
    assert addr1[19] == 1
    assert addr2[19] == 2
    assert len(addr1) == 20
    assert addr1[:19] == bytes(19)


def test_generate_test_address_out_of_range():
    with pytest.raises(ValueError):
        generate_test_address(256)