import pytest

from nbmap.core.errors import MalformedNameError
from nbmap.core.tokens import (
    data_source_token,
    lower_first,
    member_token,
    resource_token,
    split_token,
    type_token,
)


def test_resource_token_single_word():
    assert resource_token("index", "Aggregate") == "netbox:index/aggregate:Aggregate"


def test_resource_token_camel_case():
    assert (
        resource_token("index", "AvailableIpAddress")
        == "netbox:index/availableIpAddress:AvailableIpAddress"
    )


def test_data_source_token_keeps_lower_case_name():
    assert data_source_token("index", "getCluster") == "netbox:index/getCluster:getCluster"


def test_member_and_type_tokens_share_shape():
    assert member_token("index", "getVrf") == "netbox:index:getVrf"
    assert type_token("index", "Vrf") == "netbox:index:Vrf"
    assert type_token("index", "Vrf", package="other") == "other:index:Vrf"


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("A", "a"),
        ("a", "a"),
        ("Rir", "rir"),
        ("IpRange", "ipRange"),
        ("Ip2_Range", "ip2_Range"),
        ("getIpAddresses", "getIpAddresses"),
    ],
)
def test_lower_first_only_touches_first_character(name: str, expected: str):
    assert lower_first(name) == expected


@pytest.mark.parametrize("name", ["", "1Device", "_Device", "-x", " Device", "İx"])
def test_lower_first_rejects_malformed_names(name: str):
    with pytest.raises(MalformedNameError):
        lower_first(name)


def test_resource_token_rejects_empty_name():
    with pytest.raises(MalformedNameError, match="empty"):
        resource_token("index", "")


def test_derivation_is_deterministic():
    assert resource_token("index", "VirtualMachine") == resource_token(
        "index", "VirtualMachine"
    )


@pytest.mark.parametrize("name", ["Aggregate", "IpamRole", "getTenants", "Vlan"])
def test_trailing_segment_is_the_unchanged_name(name: str):
    parts = split_token(resource_token("index", name))

    assert parts.name == name
    assert parts.package == "netbox"
    assert parts.module == "index"
    assert parts.module_path == f"index/{name[0].lower()}{name[1:]}"


@pytest.mark.parametrize("token", ["netbox:index", "netbox::Vrf", "a:b:c:d", ""])
def test_split_token_rejects_malformed_tokens(token: str):
    with pytest.raises(MalformedNameError):
        split_token(token)


def test_lower_first_rejects_letters_that_lower_to_several_characters():
    with pytest.raises(MalformedNameError, match="single-character lower case"):
        resource_token("index", "İpAddress")
