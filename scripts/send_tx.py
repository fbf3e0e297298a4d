#!/usr/bin/env python3
"""
Send 0.001 ETH from the deployer account back to itself.
"""
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from contract_forge.transfer import main

if __name__ == "__main__":
    main()
