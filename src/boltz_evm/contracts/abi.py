"""ABI definitions of the Boltz swap contracts and ERC20 tokens.

Only the entries used by the swap service are included.
"""


def _fn(name, inputs, outputs=(), mutability="nonpayable"):
    return {
        "type": "function",
        "name": name,
        "inputs": [{"name": n, "type": t} for n, t in inputs],
        "outputs": [{"name": "", "type": t} for t in outputs],
        "stateMutability": mutability,
    }


def _event(name, inputs):
    return {
        "type": "event",
        "name": name,
        "anonymous": False,
        "inputs": [
            {"name": n, "type": t, "indexed": indexed} for n, t, indexed in inputs
        ],
    }


_CLAIM_EVENT = _event(
    "Claim",
    [("preimageHash", "bytes32", True), ("preimage", "bytes32", False)],
)

_REFUND_EVENT = _event("Refund", [("preimageHash", "bytes32", True)])


ETHER_SWAP_ABI: list[dict] = [
    _fn("version", [], ["uint8"], "view"),
    _fn("swaps", [("", "bytes32")], ["bool"], "view"),
    _fn(
        "hashValues",
        [
            ("preimageHash", "bytes32"),
            ("amount", "uint256"),
            ("claimAddress", "address"),
            ("refundAddress", "address"),
            ("timelock", "uint256"),
        ],
        ["bytes32"],
        "pure",
    ),
    _fn(
        "lock",
        [("preimageHash", "bytes32"), ("claimAddress", "address"), ("timelock", "uint256")],
        mutability="payable",
    ),
    _fn(
        "lockPrepayMinerfee",
        [
            ("preimageHash", "bytes32"),
            ("claimAddress", "address"),
            ("timelock", "uint256"),
            ("prepayAmount", "uint256"),
        ],
        mutability="payable",
    ),
    _fn(
        "claim",
        [
            ("preimage", "bytes32"),
            ("amount", "uint256"),
            ("refundAddress", "address"),
            ("timelock", "uint256"),
        ],
    ),
    _fn(
        "refund",
        [
            ("preimageHash", "bytes32"),
            ("amount", "uint256"),
            ("claimAddress", "address"),
            ("timelock", "uint256"),
        ],
    ),
    _event(
        "Lockup",
        [
            ("preimageHash", "bytes32", True),
            ("amount", "uint256", False),
            ("claimAddress", "address", False),
            ("refundAddress", "address", True),
            ("timelock", "uint256", False),
        ],
    ),
    _CLAIM_EVENT,
    _REFUND_EVENT,
]


ERC20_SWAP_ABI: list[dict] = [
    _fn("version", [], ["uint8"], "view"),
    _fn("swaps", [("", "bytes32")], ["bool"], "view"),
    _fn(
        "hashValues",
        [
            ("preimageHash", "bytes32"),
            ("amount", "uint256"),
            ("tokenAddress", "address"),
            ("claimAddress", "address"),
            ("refundAddress", "address"),
            ("timelock", "uint256"),
        ],
        ["bytes32"],
        "pure",
    ),
    _fn(
        "lock",
        [
            ("preimageHash", "bytes32"),
            ("amount", "uint256"),
            ("tokenAddress", "address"),
            ("claimAddress", "address"),
            ("timelock", "uint256"),
        ],
    ),
    _fn(
        "lockPrepayMinerfee",
        [
            ("preimageHash", "bytes32"),
            ("amount", "uint256"),
            ("tokenAddress", "address"),
            ("claimAddress", "address"),
            ("timelock", "uint256"),
        ],
        mutability="payable",
    ),
    _fn(
        "claim",
        [
            ("preimage", "bytes32"),
            ("amount", "uint256"),
            ("tokenAddress", "address"),
            ("refundAddress", "address"),
            ("timelock", "uint256"),
        ],
    ),
    _fn(
        "refund",
        [
            ("preimageHash", "bytes32"),
            ("amount", "uint256"),
            ("tokenAddress", "address"),
            ("claimAddress", "address"),
            ("timelock", "uint256"),
        ],
    ),
    _event(
        "Lockup",
        [
            ("preimageHash", "bytes32", True),
            ("amount", "uint256", False),
            ("tokenAddress", "address", False),
            ("claimAddress", "address", False),
            ("refundAddress", "address", True),
            ("timelock", "uint256", False),
        ],
    ),
    _CLAIM_EVENT,
    _REFUND_EVENT,
]


ERC20_ABI: list[dict] = [
    _fn("name", [], ["string"], "view"),
    _fn("symbol", [], ["string"], "view"),
    _fn("decimals", [], ["uint8"], "view"),
    _fn("totalSupply", [], ["uint256"], "view"),
    _fn("balanceOf", [("account", "address")], ["uint256"], "view"),
    _fn("allowance", [("owner", "address"), ("spender", "address")], ["uint256"], "view"),
    _fn("transfer", [("to", "address"), ("value", "uint256")], ["bool"]),
    _fn("approve", [("spender", "address"), ("value", "uint256")], ["bool"]),
    _fn(
        "transferFrom",
        [("from", "address"), ("to", "address"), ("value", "uint256")],
        ["bool"],
    ),
    _event(
        "Transfer",
        [("from", "address", True), ("to", "address", True), ("value", "uint256", False)],
    ),
    _event(
        "Approval",
        [("owner", "address", True), ("spender", "address", True), ("value", "uint256", False)],
    ),
]
