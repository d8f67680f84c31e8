import ipaddress

import pytest

from ptrlens.errors import InvalidAddress, PtrLensError
from ptrlens.models import AddressList, AddressRecord


@pytest.mark.parametrize("value", [
    "0.0.0.0",
    "127.0.0.1",
    "1.2.3.4",
    "10.0.0.1",
    "172.16.1.1",
    "192.168.1.1",
    "::127.0.0.1",
    "::face:b00c",
    "3ffe::a:b:c:d:e",
])
def test_parse_ok(value):
    record = AddressRecord.parse(value)
    assert record.name == ""
    assert not record.resolved
    assert record.address == ipaddress.ip_address(value)


@pytest.mark.parametrize("value", [
    "333.0.0.0",
    "127.333.0.1",
    "1.2.333.4",
    "10.0.0.555",
    "foobar",
    "::blah:blah::.168.1.1",
    "",
])
def test_parse_invalid(value):
    with pytest.raises(InvalidAddress) as exc:
        AddressRecord.parse(value)
    assert exc.value.value == value
    assert isinstance(exc.value, PtrLensError)
    assert isinstance(exc.value, ValueError)


def test_parse_strips_whitespace():
    assert AddressRecord.parse("  1.1.1.1\n").address == ipaddress.ip_address("1.1.1.1")


def test_parse_with_name():
    record = AddressRecord.parse("1.1.1.1", "one.one.one.one")
    assert record.name == "one.one.one.one"
    assert record.resolved


def test_with_name_returns_new_record():
    record = AddressRecord.parse("1.1.1.1")
    named = record.with_name("one.one.one.one")

    assert named is not record
    assert named.address == record.address
    assert record.name == ""
    assert named.name == "one.one.one.one"


def test_record_is_immutable():
    record = AddressRecord.parse("1.1.1.1")
    with pytest.raises(AttributeError):
        record.name = "x"


def test_record_ordering_ipv4_before_ipv6():
    v6 = AddressRecord.parse("::1")
    v4 = AddressRecord.parse("255.255.255.255")
    assert v4 < v6
    assert sorted([v6, v4]) == [v4, v6]


def test_record_ordering_numeric_then_name():
    a = AddressRecord.parse("9.0.0.1")
    b = AddressRecord.parse("10.0.0.1")
    assert a < b

    x = AddressRecord.parse("1.1.1.1", "a.example")
    y = AddressRecord.parse("1.1.1.1", "b.example")
    assert x < y
    assert y >= x


def test_record_equality_and_hash():
    a = AddressRecord.parse("1.1.1.1", "one")
    b = AddressRecord.parse("1.1.1.1", "one")
    assert a == b
    assert len({a, b}) == 1
    assert AddressRecord.parse("::1") != AddressRecord.parse("0.0.0.1")


def test_list_append_and_len():
    ipl = AddressList()
    assert ipl.is_empty()
    assert not ipl

    ipl.append(AddressRecord.parse("1.1.1.1"))
    ipl.push(AddressRecord.parse("1.1.1.1"))

    assert len(ipl) == 2
    assert ipl
    assert not ipl.is_empty()


def test_list_append_rejects_other_types():
    with pytest.raises(TypeError):
        AddressList().append("1.1.1.1")


def test_list_from_strings(sample_list):
    assert len(sample_list) == 3
    assert [str(r.address) for r in sample_list] == [
        "1.1.1.1", "2606:4700:4700::1111", "192.0.2.1"
    ]
    assert all(r.name == "" for r in sample_list)


def test_list_from_strings_invalid():
    with pytest.raises(InvalidAddress):
        AddressList.from_strings(["1.1.1.1", "nope"])


def test_list_from_pairs():
    ipl = AddressList.from_pairs([("1.1.1.1", "one.one.one.one"), ("::1", "localhost")])
    assert ipl[0].name == "one.one.one.one"
    assert ipl[1].address == ipaddress.ip_address("::1")
    assert ipl.to_pairs() == [("1.1.1.1", "one.one.one.one"), ("::1", "localhost")]


def test_list_sort(sample_list):
    sorted_list = sample_list.sorted()
    assert [str(r.address) for r in sorted_list] == [
        "1.1.1.1", "192.0.2.1", "2606:4700:4700::1111"
    ]
    # sorted() leaves the original alone
    assert str(sample_list[1].address) == "2606:4700:4700::1111"

    sample_list.sort()
    assert sample_list == sorted_list


def test_list_copy_is_independent(sample_list):
    copy = sample_list.copy()
    copy.append(AddressRecord.parse("8.8.8.8"))
    assert len(sample_list) == 3
    assert len(copy) == 4


def test_list_indexing_and_slicing(sample_list):
    assert sample_list[-1].address == ipaddress.ip_address("192.0.2.1")
    head = sample_list[:2]
    assert isinstance(head, AddressList)
    assert len(head) == 2


def test_list_keeps_duplicates():
    ipl = AddressList.from_strings(["1.1.1.1", "1.1.1.1"])
    assert len(ipl) == 2


def test_list_equality():
    assert AddressList.from_strings(["1.1.1.1"]) == AddressList.from_strings(["1.1.1.1"])
    assert AddressList.from_strings(["1.1.1.1"]) != AddressList.from_strings(["1.0.0.1"])


@pytest.mark.parametrize("value", [1, 16843009, b"\x01\x01\x01\x01", None, ipaddress.ip_address("1.1.1.1")])
def test_parse_rejects_non_literals(value):
    with pytest.raises(InvalidAddress) as exc:
        AddressRecord.parse(value)
    assert exc.value.value == value


def test_record_ordering_with_scope_id():
    a = AddressRecord.parse("fe80::1%a")
    b = AddressRecord.parse("fe80::1%b")
    plain = AddressRecord.parse("fe80::1")

    assert a != b
    assert a < b
    assert not a >= b
    assert plain < a
    assert sorted([b, a, plain]) == [plain, a, b]
    assert AddressRecord.parse("fe80::1%a") <= a
