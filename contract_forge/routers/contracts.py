"""
Contract listing/creation endpoints. There is no persistence layer yet.
"""
from fastapi import APIRouter

from ..schemas.contract import ContractListResponse, MessageResponse

router = APIRouter()


@router.get("/contracts", response_model=ContractListResponse)
def list_contracts():
    return ContractListResponse(contracts=[])


@router.post("/contracts", response_model=MessageResponse)
def create_contract():
    return MessageResponse(message="Contract creation endpoint")
