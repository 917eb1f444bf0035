from web3_marketplace.contract import MARKETPLACE_ABI, MUTATING_METHODS, load_abi


def functions_by_name() -> dict:
    return {entry["name"]: entry for entry in MARKETPLACE_ABI if entry.get("type") == "function"}


def test_bundled_abi_has_every_mutating_method() -> None:
    functions = functions_by_name()
    assert MUTATING_METHODS <= functions.keys()
    for name in MUTATING_METHODS - {"purchaseItem"}:
        assert functions[name]["stateMutability"] == "nonpayable"
    assert functions["purchaseItem"]["stateMutability"] == "payable"


def test_list_item_signature() -> None:
    inputs = functions_by_name()["listItem"]["inputs"]
    assert [(i["name"], i["type"]) for i in inputs] == [
        ("nftContract", "address"),
        ("tokenId", "uint256"),
        ("price", "uint256"),
        ("deadline", "uint256"),
    ]


def test_read_accessors_are_views() -> None:
    functions = functions_by_name()
    for name in ("itemById", "activeItems", "usersListings", "expiredListingIds", "totalListings"):
        assert functions[name]["stateMutability"] == "view"


def test_load_abi_returns_fresh_copy() -> None:
    abi = load_abi()
    assert abi == MARKETPLACE_ABI
    assert abi is not MARKETPLACE_ABI
