"""
Contract compilation endpoint.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends

from ..core.dependencies import get_compiler
from ..core.errors import ApiError
from ..schemas.contract import DEFAULT_CONTRACT_NAME, CompileRequest, CompileResponse
from ..services.compiler import (
    CompilationError,
    ContractCompiler,
    InvalidContractNameError,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/compile-contract", response_model=CompileResponse)
async def compile_contract(
    request: Optional[CompileRequest] = None,
    compiler: ContractCompiler = Depends(get_compiler),
):
    """
    Compile Solidity source with Hardhat.
    Returns the ABI and bytecode of the named contract.
    """
    if request is None:
        request = CompileRequest()
    if not request.contract_code:
        raise ApiError(400, "Contract code is required")

    contract_name = request.contract_name or DEFAULT_CONTRACT_NAME
    logger.info(f"🔨 Compiling contract: {contract_name}")

    try:
        compiled = await compiler.compile(request.contract_code, contract_name)
    except InvalidContractNameError as e:
        raise ApiError(400, "Invalid contract name", details=str(e))
    except CompilationError as e:
        logger.error(f"❌ Error compiling contract: {e}", exc_info=True)
        raise ApiError(500, "Failed to compile contract", details=str(e))

    return CompileResponse(
        abi=compiled.abi,
        bytecode=compiled.bytecode,
        contract_name=compiled.contract_name,
    )
