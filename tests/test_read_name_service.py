import pytest

from suikit.models.read_name_service import (
    SuiXResolveNameServiceAddressRequest,
    SuiXResolveNameServiceNamesRequest,
    SuiXResolveNameServiceNamesResponse,
)

ADDRESS = "0x134c18293d898bb188077cbceb8ababf9c4328d39d8c873285ae7751fb821818"


def test_address_request_shape():
    assert SuiXResolveNameServiceAddressRequest(name="yoshi.sui").to_dict() == {"name": "yoshi.sui"}


def test_names_request_shape():
    request = SuiXResolveNameServiceNamesRequest(address=ADDRESS, limit=10)
    assert request.to_dict() == {"address": ADDRESS, "cursor": None, "limit": 10}


def test_names_request_limit_checked():
    with pytest.raises(ValueError):
        SuiXResolveNameServiceNamesRequest(address=ADDRESS, limit=51)


def test_names_response_from_json():
    response = SuiXResolveNameServiceNamesResponse.from_json(
        '{"data": ["yoshi.sui"], "nextCursor": "c1", "hasNextPage": false}'
    )
    assert response.data == ["yoshi.sui"]
    assert response.next_cursor == "c1"
    assert response.has_next_page is False
    assert SuiXResolveNameServiceNamesResponse.from_json(response.to_json()) == response


def test_names_response_defaults_when_missing():
    response = SuiXResolveNameServiceNamesResponse.from_json("{}")
    assert response.data == []
    assert response.next_cursor == ""