"""Command-line drivers: ``create-fhevm-example``, ``create-fhevm-category``, ``generate-fhevm-docs``."""
