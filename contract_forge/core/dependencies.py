"""
FastAPI dependencies providing the shared service instances.
"""
from functools import lru_cache

from .config import settings
from ..services.compiler import ContractCompiler
from ..services.generator import ContractGenerator


@lru_cache
def get_generator() -> ContractGenerator:
    """Get the process-wide contract generator."""
    return ContractGenerator(settings)


@lru_cache
def get_compiler() -> ContractCompiler:
    """Get the process-wide contract compiler."""
    return ContractCompiler(settings)
