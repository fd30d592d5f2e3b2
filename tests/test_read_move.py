from suikit.models.read_move import (
    GetMoveFunctionArgTypesRequest,
    GetNormalizedMoveFunctionRequest,
    GetNormalizedMoveModuleRequest,
    GetNormalizedMoveModuleResponse,
    GetNormalizedMoveModulesByPackageRequest,
    GetNormalizedMoveStructRequest,
)

PACKAGE = "0x7d584c9a27ca4a546e8203b005b0e9ae746c9bec6c8c3c0bc84611bcf4ceab5f"


def test_arg_types_request_keys():
    request = GetMoveFunctionArgTypesRequest(
        package=PACKAGE, module="auction", function="start_an_auction"
    )
    assert request.to_dict() == {
        "Package": PACKAGE,
        "Module": "auction",
        "Function": "start_an_auction",
    }


def test_arg_types_request_reads_any_case():
    request = GetMoveFunctionArgTypesRequest.from_dict(
        {"package": PACKAGE, "module": "auction", "function": "f"}
    )
    assert request.package == PACKAGE
    assert request.function == "f"


def test_module_requests_keys():
    assert GetNormalizedMoveModulesByPackageRequest(package=PACKAGE).to_dict() == {
        "package": PACKAGE
    }
    assert GetNormalizedMoveModuleRequest(package=PACKAGE, module_name="auction").to_dict() == {
        "package": PACKAGE,
        "moduleName": "auction",
    }


def test_struct_and_function_requests_round_trip():
    struct_request = GetNormalizedMoveStructRequest(
        package=PACKAGE, module_name="auction", struct_name="BidDetail"
    )
    function_request = GetNormalizedMoveFunctionRequest(
        package=PACKAGE, module_name="auction", function_name="configure_auction"
    )
    assert GetNormalizedMoveStructRequest.from_json(struct_request.to_json()) == struct_request
    assert function_request.to_dict()["functionName"] == "configure_auction"
    assert GetNormalizedMoveFunctionRequest.from_dict(function_request.to_dict()) == function_request


def test_module_response_parses():
    module = GetNormalizedMoveModuleResponse.from_dict(
        {"fileFormatVersion": 6, "address": PACKAGE, "name": "auction",
         "friends": [{"address": PACKAGE, "name": "bid"}], "structs": {}, "exposedFunctions": {}}
    )
    assert module.name == "auction"
    assert module.friends[0].name == "bid"
    assert module.file_format_version == 6