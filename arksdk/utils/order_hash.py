from poseidon_py.poseidon_hash import poseidon_hash_many

from arksdk.types.types import OrderV1


def get_order_hash_from_order_v1(order: OrderV1) -> int:
    """
    Poseidon hash over the serialised order, in struct field order.

    Must match the executor's own derivation; a mismatch is silent and only
    shows up as "order not found" on later lookups.
    """
    return poseidon_hash_many(order.to_calldata())
