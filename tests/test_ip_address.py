import pytest

from coroflow.ip_address import Domain, IpAddress


def test_domain_names():
    assert str(IpAddress.from_string("127.0.0.1").domain) == "ipv4"
    assert str(IpAddress.from_string("::1", Domain.IPV6).domain) == "ipv6"


def test_unknown_domain_rejected():
    with pytest.raises(ValueError):
        Domain(123456)


def test_ipv4_round_trip():
    addr = IpAddress.from_string("127.0.0.1")
    assert addr.domain is Domain.IPV4
    assert addr.to_string() == "127.0.0.1"
    assert addr.data == bytes([127, 0, 0, 1])


def test_default_is_any_ipv4():
    addr = IpAddress()
    assert addr.domain is Domain.IPV4
    assert addr.to_string() == "0.0.0.0"
    assert addr == IpAddress.from_string("0.0.0.0")


def test_ipv6_round_trip():
    addr = IpAddress.from_string("::1", Domain.IPV6)
    assert addr.domain is Domain.IPV6
    assert len(addr.data) == 16
    assert addr.data[-1] == 1
    assert addr.to_string() == "::1"


def test_binary_constructor_matches_parse():
    parsed = IpAddress.from_string("127.0.0.1")
    built = IpAddress(parsed.data, Domain.IPV4)
    assert built == parsed
    assert hash(built) == hash(parsed)


@pytest.mark.parametrize(
    "text, domain",
    [("not an address", Domain.IPV4), ("256.1.1.1", Domain.IPV4), ("::1", Domain.IPV4), ("1.2.3", Domain.IPV6)],
)
def test_from_string_invalid(text, domain):
    with pytest.raises(ValueError):
        IpAddress.from_string(text, domain)


def test_ipv4_too_long():
    with pytest.raises(ValueError):
        IpAddress(bytes(5), Domain.IPV4)


def test_ipv6_too_long():
    with pytest.raises(ValueError):
        IpAddress(bytes(17), Domain.IPV6)


def test_ordering_by_domain_then_bytes():
    low = IpAddress.from_string("10.0.0.1")
    high = IpAddress.from_string("10.0.0.2")
    v6 = IpAddress.from_string("::", Domain.IPV6)
    assert low < high
    assert high > low
    assert sorted([v6, high, low]) == [low, high, v6]