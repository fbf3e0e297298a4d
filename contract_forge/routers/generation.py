"""
AI contract generation endpoint.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends

from ..core.dependencies import get_generator
from ..core.errors import ApiError
from ..schemas.contract import GenerationRequest, GenerationResponse
from ..services.generator import ContractGenerator, GenerationError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/generate-contract", response_model=GenerationResponse)
async def generate_contract(
    request: Optional[GenerationRequest] = None,
    generator: ContractGenerator = Depends(get_generator),
):
    """
    Generate a Solidity contract from a natural-language prompt.
    Returns the contract source together with a plain-English explanation.
    """
    if request is None:
        request = GenerationRequest()
    if not request.prompt:
        raise ApiError(400, "Prompt is required")

    if not generator.configured:
        raise ApiError(500, "OpenAI API key not configured")

    logger.info(f"🤖 Generating contract for prompt: {request.prompt}")

    try:
        result = await generator.generate(request.prompt)
    except GenerationError as e:
        logger.error(f"❌ Error generating contract: {e}", exc_info=True)
        raise ApiError(500, "Failed to generate contract", details=str(e))

    return GenerationResponse(
        contract=result.contract_source,
        explanation=result.explanation,
        prompt=result.prompt,
    )
