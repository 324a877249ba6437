"""Static catalogue of every FHEVM example and category.

Paths are relative to :attr:`ScaffoldConfig.source_root`. The tables are
built once at import time and exposed read-only.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from .models import CategoryDescriptor, Difficulty, ExampleDescriptor

BEGINNER = Difficulty.BEGINNER
INTERMEDIATE = Difficulty.INTERMEDIATE
ADVANCED = Difficulty.ADVANCED


def _example(
    identifier: str,
    title: str,
    category: str,
    contract: str,
    description: str,
    difficulty: Difficulty,
    concepts: tuple[str, ...],
    tags: tuple[str, ...],
    chapter: str,
    learning_objectives: tuple[str, ...] = (),
) -> ExampleDescriptor:
    return ExampleDescriptor(
        identifier=identifier,
        title=title,
        category=category,
        description=description,
        contract_path=f"contracts/{category}/{contract}.sol",
        test_path=f"test/{category}/{contract}.test.ts",
        difficulty=difficulty,
        concepts=concepts,
        tags=tags,
        chapter=chapter,
        learning_objectives=learning_objectives,
    )


_EXAMPLES: tuple[ExampleDescriptor, ...] = (
    # -- basic ---------------------------------------------------------------
    _example(
        "fhe-counter", "FHE Counter", "basic", "FHECounter",
        "Simple encrypted counter demonstrating FHE.add and FHE.sub operations "
        "with permission management",
        BEGINNER,
        ("encryption", "arithmetic", "permissions", "state-management"),
        ("counter", "basic", "arithmetic"),
        "Getting Started",
        (
            "Store encrypted values on-chain",
            "Perform arithmetic on encrypted data",
            "Manage FHE permissions (allowThis + allow)",
        ),
    ),
    _example(
        "fhe-add", "FHE Addition", "basic", "FHEAdd",
        "Demonstrates FHE.add for encrypted arithmetic operations with proper "
        "permission handling",
        BEGINNER,
        ("arithmetic", "fhe-add", "operations"),
        ("arithmetic", "add", "operations"),
        "Arithmetic Operations",
    ),
    _example(
        "fhe-sub", "FHE Subtraction", "basic", "FHESub",
        "Demonstrates FHE.sub for encrypted subtraction operations",
        BEGINNER,
        ("arithmetic", "fhe-sub", "operations"),
        ("arithmetic", "subtract", "operations"),
        "Arithmetic Operations",
    ),
    _example(
        "fhe-eq", "FHE Equality Comparison", "basic", "FHEEq",
        "Demonstrates FHE.eq for comparing encrypted values without revealing them",
        BEGINNER,
        ("comparison", "fhe-eq", "privacy"),
        ("comparison", "equality", "operations"),
        "Comparison Operations",
    ),
    _example(
        "encrypt-single-value", "Encrypt Single Value", "basic", "EncryptSingleValue",
        "Demonstrates encrypting and storing a single encrypted value with proper permissions",
        BEGINNER,
        ("encryption", "input-proof", "storage"),
        ("encryption", "single-value", "input-proof"),
        "Encryption Basics",
    ),
    _example(
        "encrypt-multiple-values", "Encrypt Multiple Values", "basic", "EncryptMultipleValues",
        "Demonstrates handling multiple encrypted values with array storage and management",
        BEGINNER,
        ("encryption", "arrays", "state-management"),
        ("encryption", "multiple", "arrays"),
        "Encryption Basics",
    ),
    _example(
        "user-decrypt-single", "User Decrypt Single Value", "basic", "UserDecryptSingle",
        "Demonstrates how users decrypt encrypted values they created",
        BEGINNER,
        ("decryption", "user-access", "permissions"),
        ("decryption", "user", "permissions"),
        "User Decryption",
    ),
    _example(
        "user-decrypt-multiple", "User Decrypt Multiple Values", "basic", "UserDecryptMultiple",
        "Demonstrates user decryption of multiple encrypted values with batch operations",
        BEGINNER,
        ("decryption", "batch-operations", "permissions"),
        ("decryption", "batch", "multiple"),
        "User Decryption",
    ),
    _example(
        "public-decrypt", "Public Decryption", "basic", "PublicDecrypt",
        "Demonstrates public decryption where trusted entities can decrypt values "
        "for transparency",
        INTERMEDIATE,
        ("decryption", "public-access", "oracle"),
        ("decryption", "public", "transparency"),
        "User Decryption",
    ),
    # -- access-control ------------------------------------------------------
    _example(
        "access-control-fundamentals", "Access Control Fundamentals", "access-control",
        "AccessControlFundamentals",
        "Introduction to the FHE permission system and why both FHE.allowThis() "
        "and FHE.allow() are required",
        INTERMEDIATE,
        ("permissions", "access-control", "security"),
        ("permissions", "access-control", "security"),
        "Access Control",
        (
            "Understand contract permissions (FHE.allowThis)",
            "Understand user permissions (FHE.allow)",
            "Why both are mandatory",
        ),
    ),
    _example(
        "fhe-allow-example", "FHE.allow() Pattern", "access-control", "FHEAllowExample",
        "Demonstrates proper use of FHE.allow() for granting user-level permissions",
        INTERMEDIATE,
        ("fhe-allow", "user-permissions", "sharing"),
        ("permissions", "user-access", "sharing"),
        "Access Control",
    ),
    _example(
        "fhe-allowThis-example", "FHE.allowThis() Pattern", "access-control",
        "FHEAllowThisExample",
        "Demonstrates proper use of FHE.allowThis() for granting contract-level permissions",
        INTERMEDIATE,
        ("fhe-allowThis", "contract-permissions", "operations"),
        ("permissions", "contract-access", "operations"),
        "Access Control",
    ),
    _example(
        "fhe-allowTransient-example", "FHE.allowTransient() Pattern", "access-control",
        "FHEAllowTransientExample",
        "Demonstrates temporary permissions using FHE.allowTransient() for transient values",
        INTERMEDIATE,
        ("fhe-allowTransient", "temporary-permissions", "memory"),
        ("permissions", "transient", "memory"),
        "Access Control",
    ),
    # -- anti-patterns -------------------------------------------------------
    _example(
        "view-function-error", "View Function Anti-Pattern", "anti-patterns",
        "ViewFunctionError",
        "Common mistake: computing on encrypted values inside view functions",
        INTERMEDIATE,
        ("anti-pattern", "view-functions", "common-mistakes"),
        ("anti-pattern", "error", "view-functions"),
        "Common Mistakes",
    ),
    _example(
        "missing-allowThis", "Missing FHE.allowThis() Anti-Pattern", "anti-patterns",
        "MissingAllowThis",
        "Common mistake: forgetting FHE.allowThis(), so the contract cannot reuse "
        "its own stored handle",
        INTERMEDIATE,
        ("anti-pattern", "permissions", "common-mistakes"),
        ("anti-pattern", "critical-error", "permissions"),
        "Common Mistakes",
    ),
    _example(
        "encryption-signer-mismatch", "Encryption/Signer Mismatch Anti-Pattern",
        "anti-patterns", "EncryptionSignerMismatch",
        "Common mistake: one account encrypts an input and a different account submits it",
        INTERMEDIATE,
        ("anti-pattern", "signer", "encryption-binding"),
        ("anti-pattern", "error", "security"),
        "Common Mistakes",
    ),
    _example(
        "lifecycle-errors", "Lifecycle Management Anti-Pattern", "anti-patterns",
        "HandleLifecycleErrors",
        "Common mistake: using uninitialized or cleared encrypted handles",
        INTERMEDIATE,
        ("anti-pattern", "lifecycle", "state-management"),
        ("anti-pattern", "error", "lifecycle"),
        "Common Mistakes",
    ),
    # -- openzeppelin --------------------------------------------------------
    _example(
        "erc7984-example", "ERC7984 Confidential Token", "openzeppelin", "ERC7984Example",
        "Demonstrates the ERC7984 standard for confidential tokens with encrypted balances",
        INTERMEDIATE,
        ("erc7984", "tokens", "confidential"),
        ("tokens", "erc7984", "confidential"),
        "Token Standards",
    ),
    _example(
        "erc7984-wrapper", "ERC7984 Wrapper", "openzeppelin", "ERC7984Wrapper",
        "Demonstrates wrapping standard ERC20 tokens as confidential tokens",
        INTERMEDIATE,
        ("erc7984", "wrapping", "confidential-tokens"),
        ("tokens", "wrapping", "confidential"),
        "Token Standards",
    ),
    _example(
        "token-swaps", "Confidential Token Swaps", "openzeppelin", "TokenSwaps",
        "Demonstrates private token swapping with encrypted amounts",
        INTERMEDIATE,
        ("swaps", "dex", "encrypted-amounts"),
        ("tokens", "swaps", "dex"),
        "Advanced Tokens",
    ),
    _example(
        "vesting-wallet", "Confidential Vesting Wallet", "openzeppelin", "VestingWallet",
        "Demonstrates confidential token vesting with encrypted release amounts and schedules",
        ADVANCED,
        ("vesting", "time-locks", "token-release"),
        ("tokens", "vesting", "schedule"),
        "Advanced Tokens",
    ),
    _example(
        "private-voting", "Private Voting System", "openzeppelin", "PrivateVoting",
        "Demonstrates confidential voting with encrypted vote counts",
        ADVANCED,
        ("voting", "governance", "encrypted-counting"),
        ("voting", "governance", "privacy"),
        "Advanced Applications",
    ),
    # -- advanced ------------------------------------------------------------
    _example(
        "blind-auction", "Blind Auction", "advanced", "BlindAuction",
        "Demonstrates a blind auction with sealed encrypted bids and a private reveal phase",
        ADVANCED,
        ("auctions", "privacy", "multi-phase"),
        ("auctions", "privacy", "security"),
        "Advanced Applications",
    ),
    _example(
        "dutch-auction", "Dutch Auction", "advanced", "DutchAuction",
        "Demonstrates a Dutch auction with a descending public price and encrypted "
        "purchase quantities",
        ADVANCED,
        ("auctions", "pricing", "privacy"),
        ("auctions", "pricing", "market"),
        "Advanced Applications",
    ),
    _example(
        "voting-system", "Advanced Voting", "advanced", "AdvancedVoting",
        "Demonstrates governance voting over several proposals with encrypted tallies",
        ADVANCED,
        ("governance", "voting", "privacy"),
        ("governance", "voting", "privacy"),
        "Advanced Applications",
    ),
)


_CATEGORIES: tuple[CategoryDescriptor, ...] = (
    CategoryDescriptor(
        identifier="basic",
        title="Basic Operations",
        description="Fundamental FHEVM operations: encryption, decryption, arithmetic, "
        "and simple contracts",
        examples=(
            "fhe-counter",
            "fhe-add",
            "fhe-sub",
            "fhe-eq",
            "encrypt-single-value",
            "encrypt-multiple-values",
            "user-decrypt-single",
            "user-decrypt-multiple",
            "public-decrypt",
        ),
        difficulty=BEGINNER,
    ),
    CategoryDescriptor(
        identifier="access-control",
        title="Access Control & Permissions",
        description="Permission management patterns: FHE.allowThis(), FHE.allow(), "
        "and FHE.allowTransient()",
        examples=(
            "access-control-fundamentals",
            "fhe-allow-example",
            "fhe-allowThis-example",
            "fhe-allowTransient-example",
        ),
        difficulty=INTERMEDIATE,
    ),
    CategoryDescriptor(
        identifier="anti-patterns",
        title="Anti-Patterns & Common Mistakes",
        description="What not to do: the errors behind most failed FHEVM deployments",
        examples=(
            "view-function-error",
            "missing-allowThis",
            "encryption-signer-mismatch",
            "lifecycle-errors",
        ),
        difficulty=INTERMEDIATE,
    ),
    CategoryDescriptor(
        identifier="openzeppelin",
        title="OpenZeppelin & Token Standards",
        description="Confidential tokens, ERC7984, swaps, vesting, and governance",
        examples=(
            "erc7984-example",
            "erc7984-wrapper",
            "token-swaps",
            "vesting-wallet",
            "private-voting",
        ),
        difficulty=INTERMEDIATE,
    ),
    CategoryDescriptor(
        identifier="advanced",
        title="Advanced Applications",
        description="Complex use cases: auctions, governance, and multi-phase privacy mechanisms",
        examples=("blind-auction", "dutch-auction", "voting-system"),
        difficulty=ADVANCED,
    ),
)


EXAMPLES: Mapping[str, ExampleDescriptor] = MappingProxyType(
    {example.identifier: example for example in _EXAMPLES}
)
CATEGORIES: Mapping[str, CategoryDescriptor] = MappingProxyType(
    {category.identifier: category for category in _CATEGORIES}
)
