"""FHEVM example scaffolding.

Generates standalone Hardhat projects and GitBook pages from a registry of
FHEVM Solidity examples.
"""

__version__ = "0.1.0"
