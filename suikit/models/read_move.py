"""Requests and responses for Move module introspection."""

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, List

from suikit.models.base import JsonModel
from suikit.models.sui_json_rpc_types import (
    SuiMoveNormalizedFunction,
    SuiMoveNormalizedModule,
    SuiMoveNormalizedStruct,
)


def _json(key: str) -> Any:
    return dataclasses.field(default="", metadata={"json": key})


@dataclass
class GetMoveFunctionArgTypesRequest(JsonModel):
    package: str = _json("Package")
    module: str = _json("Module")
    function: str = _json("Function")


GetMoveFunctionArgTypesResponse = List[Any]


@dataclass
class GetNormalizedMoveModulesByPackageRequest(JsonModel):
    package: str = _json("package")


GetNormalizedMoveModulesByPackageResponse = Dict[str, SuiMoveNormalizedModule]


@dataclass
class GetNormalizedMoveModuleRequest(JsonModel):
    package: str = _json("package")
    module_name: str = _json("moduleName")


GetNormalizedMoveModuleResponse = SuiMoveNormalizedModule


@dataclass
class GetNormalizedMoveStructRequest(JsonModel):
    package: str = _json("package")
    module_name: str = _json("moduleName")
    struct_name: str = _json("structName")


GetNormalizedMoveStructResponse = SuiMoveNormalizedStruct


@dataclass
class GetNormalizedMoveFunctionRequest(JsonModel):
    package: str = _json("package")
    module_name: str = _json("moduleName")
    function_name: str = _json("functionName")


GetNormalizedMoveFunctionResponse = SuiMoveNormalizedFunction