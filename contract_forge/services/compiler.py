"""
Contract compilation - runs the Hardhat compiler against submitted Solidity
source and reads the ABI and bytecode back from its artifacts.

Every compile gets its own throwaway Hardhat workspace, so concurrent requests
never share source files, artifacts or the compiler cache.
"""
import asyncio
import json
import logging
import os
import re
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional

from ..core.config import Settings

logger = logging.getLogger(__name__)

CONTRACT_NAME_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

# Files copied from the toolchain project into each workspace
SEED_FILE_PATTERNS = ("hardhat.config.*", "package.json", "tsconfig.json")

# Keep diagnostics readable in error responses
MAX_OUTPUT_CHARS = 2000


class CompilationError(RuntimeError):
    """The compiler failed, timed out, or produced no usable artifact."""


class InvalidContractNameError(ValueError):
    """Contract name is not a Solidity identifier."""


@dataclass
class CompiledContract:
    contract_name: str
    abi: List[Any]
    bytecode: str


def validate_contract_name(contract_name: str) -> str:
    if not contract_name or not CONTRACT_NAME_PATTERN.match(contract_name):
        raise InvalidContractNameError(
            f"Contract name must be a Solidity identifier, got {contract_name!r}"
        )
    return contract_name


def _tail(output: str) -> str:
    output = output.strip()
    if len(output) > MAX_OUTPUT_CHARS:
        return "..." + output[-MAX_OUTPUT_CHARS:]
    return output


class ContractCompiler:
    def __init__(self, settings: Settings):
        self.project_dir = Path(settings.HARDHAT_PROJECT_DIR).resolve()
        self.command = list(settings.COMPILE_COMMAND)
        self.work_dir = Path(settings.COMPILE_WORK_DIR) if settings.COMPILE_WORK_DIR else None
        self.timeout = settings.COMPILE_TIMEOUT_SECONDS
        self._slots = asyncio.Semaphore(settings.COMPILE_MAX_CONCURRENCY)

    def create_workspace(self) -> Path:
        """Create a fresh Hardhat project directory seeded from the toolchain project."""
        if self.work_dir is not None:
            self.work_dir.mkdir(parents=True, exist_ok=True)
        workspace = Path(tempfile.mkdtemp(prefix="compile-", dir=self.work_dir))

        for pattern in SEED_FILE_PATTERNS:
            for seed in self.project_dir.glob(pattern):
                shutil.copy2(seed, workspace / seed.name)

        node_modules = self.project_dir / "node_modules"
        if node_modules.is_dir():
            os.symlink(node_modules, workspace / "node_modules", target_is_directory=True)

        (workspace / "contracts").mkdir()
        return workspace

    def remove_workspace(self, workspace: Path) -> None:
        try:
            shutil.rmtree(workspace)
        except OSError as e:
            logger.warning(f"Cleanup warning: could not remove {workspace}: {e}")

    async def run_compiler(self, workspace: Path) -> str:
        """Run the compile command in the workspace and return its combined output."""
        try:
            process = await asyncio.create_subprocess_exec(
                *self.command,
                cwd=str(workspace),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.STDOUT,
            )
        except OSError as e:
            raise CompilationError(f"Could not start compiler {self.command[0]!r}: {e}") from e

        try:
            stdout, _ = await asyncio.wait_for(process.communicate(), timeout=self.timeout)
        except asyncio.TimeoutError:
            process.kill()
            await process.wait()
            raise CompilationError(f"Compilation timed out after {self.timeout:g}s")
        except asyncio.CancelledError:
            process.kill()
            await process.wait()
            raise

        output = stdout.decode("utf-8", errors="replace")
        if process.returncode != 0:
            raise CompilationError(
                f"Command failed: {' '.join(self.command)}\n{_tail(output)}"
            )
        logger.debug(f"Compiler output:\n{output}")
        return output

    def find_artifact(self, workspace: Path, contract_name: str) -> Path:
        """
        Locate the artifact for contract_name.

        Hardhat writes artifacts/contracts/<file>.sol/<Contract>.json and the
        source is always saved as <contract_name>.sol, so a source that does not
        declare contract_name has no artifact to return.
        """
        expected = (
            workspace / "artifacts" / "contracts"
            / f"{contract_name}.sol" / f"{contract_name}.json"
        )
        if not expected.exists():
            raise CompilationError("Compilation artifacts not found")
        return expected

    def read_artifact(self, artifact_path: Path, contract_name: str) -> CompiledContract:
        try:
            with open(artifact_path) as f:
                artifact = json.load(f)
            return CompiledContract(
                contract_name=contract_name,
                abi=artifact["abi"],
                bytecode=artifact["bytecode"],
            )
        except (OSError, ValueError, KeyError, TypeError) as e:
            raise CompilationError(f"Could not read artifact {artifact_path.name}: {e}") from e

    async def compile(self, source: str, contract_name: str) -> CompiledContract:
        """
        Compile one contract and return its ABI and bytecode.

        The workspace (source, artifacts and cache) is deleted whether or not
        compilation succeeds.
        """
        validate_contract_name(contract_name)

        async with self._slots:
            workspace: Optional[Path] = None
            try:
                workspace = self.create_workspace()
                source_path = workspace / "contracts" / f"{contract_name}.sol"
                source_path.write_text(source, encoding="utf-8")

                await self.run_compiler(workspace)
                artifact_path = self.find_artifact(workspace, contract_name)
                return self.read_artifact(artifact_path, contract_name)
            except (OSError, ValueError) as e:
                raise CompilationError(str(e)) from e
            finally:
                if workspace is not None:
                    self.remove_workspace(workspace)
