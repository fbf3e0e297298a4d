"""
Pydantic schemas for the contract generation and compilation endpoints.
"""
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

DEFAULT_CONTRACT_NAME = "GeneratedContract"


class GenerationRequest(BaseModel):
    prompt: Optional[str] = None


class GenerationResponse(BaseModel):
    success: bool = True
    contract: str
    explanation: str
    prompt: str


class CompileRequest(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, validate_by_name=True, validate_by_alias=True
    )

    contract_code: Optional[str] = None
    contract_name: Optional[str] = DEFAULT_CONTRACT_NAME


class CompileResponse(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, validate_by_name=True, validate_by_alias=True
    )

    success: bool = True
    abi: List[Any]
    bytecode: str
    contract_name: str


class ContractListResponse(BaseModel):
    contracts: List[Any] = []


class MessageResponse(BaseModel):
    message: str
