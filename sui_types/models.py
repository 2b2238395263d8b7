"""Data models — all frozen (immutable)."""
from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from .hexdata import Address, Base64Data, ObjectId, TransactionDigest

U64_MAX = 2**64 - 1


# ---------------------------------------------------------------------------
# Opaque JSON
# ---------------------------------------------------------------------------


class JsonObject(Mapping):
    """Read-only JSON object. Hashable, so models holding one stay hashable."""

    __slots__ = ("_items",)

    def __init__(self, items: Mapping[str, Any] | None = None) -> None:
        self._items = dict(items or {})

    def __getitem__(self, key: str) -> Any:
        return self._items[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __hash__(self) -> int:
        return hash(frozenset(self._items.items()))

    def __repr__(self) -> str:
        return f"JsonObject({self._items!r})"


def freeze_json(value: Any) -> Any:
    """Copy a parsed JSON value into tuples and ``JsonObject``s."""
    if isinstance(value, (list, tuple)):
        return tuple(freeze_json(v) for v in value)
    if isinstance(value, Mapping):
        return JsonObject({k: freeze_json(v) for k, v in value.items()})
    return value


def thaw_json(value: Any) -> Any:
    """Inverse of :func:`freeze_json`: plain lists and dicts again."""
    if isinstance(value, (list, tuple)):
        return [thaw_json(v) for v in value]
    if isinstance(value, Mapping):
        return {k: thaw_json(v) for k, v in value.items()}
    return value


def _freeze_fields(instance: Any, *names: str) -> None:
    for name in names:
        object.__setattr__(instance, name, freeze_json(getattr(instance, name)))


@dataclass(frozen=True)
class ObjectRef:
    """Reference to a specific object version.

    Field order matches the BCS layout and must not change.
    """

    object_id: ObjectId
    version: int
    digest: TransactionDigest


@dataclass(frozen=True)
class MoveModule:
    package: ObjectId
    module: str


@dataclass(frozen=True)
class TimeRange:
    """Half-open interval in milliseconds since epoch."""

    start_time: int
    end_time: int

    def __post_init__(self) -> None:
        if self.start_time > self.end_time:
            raise ValueError(
                f"start_time {self.start_time} is after end_time {self.end_time}"
            )


# ---------------------------------------------------------------------------
# Ownership
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SharedOwner:
    initial_shared_version: int


@dataclass(frozen=True)
class ObjectOwnerInternal:
    """Structured owner record, e.g. ``{"AddressOwner": "0x..."}``."""

    address_owner: Address | None = None
    object_owner: Address | None = None
    shared: SharedOwner | None = None


@dataclass(frozen=True)
class ObjectOwner:
    """Owner of an object: a bare string (e.g. ``"Immutable"``) or a record.

    Build one with :meth:`from_string` or :meth:`from_internal`. At most one
    arm may be set. ``ObjectOwner()`` is the zero value: decoding never
    returns it and encoding it raises ``EmptyUnionError``.
    """

    string: str | None = None
    internal: ObjectOwnerInternal | None = None

    def __post_init__(self) -> None:
        if self.string is not None and self.internal is not None:
            raise ValueError("ObjectOwner cannot set both the string and record arms")

    @classmethod
    def from_string(cls, value: str) -> ObjectOwner:
        return cls(string=value)

    @classmethod
    def from_internal(cls, value: ObjectOwnerInternal) -> ObjectOwner:
        return cls(internal=value)

    @property
    def is_empty(self) -> bool:
        return self.string is None and self.internal is None


# ---------------------------------------------------------------------------
# Transaction payloads
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TransferObject:
    recipient: Address
    object_ref: ObjectRef


@dataclass(frozen=True)
class ModulePublish:
    modules: tuple[Base64Data, ...] = ()


@dataclass(frozen=True)
class MoveCall:
    package: ObjectId
    module: str
    function: str
    type_arguments: tuple[Any, ...] = ()
    arguments: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        _freeze_fields(self, "type_arguments", "arguments")


@dataclass(frozen=True)
class TransferSui:
    recipient: Address
    amount: int


@dataclass(frozen=True)
class Pay:
    coins: tuple[ObjectRef, ...] = ()
    recipients: tuple[Address, ...] = ()
    amounts: tuple[int, ...] = ()


@dataclass(frozen=True)
class PaySui:
    coins: tuple[ObjectRef, ...] = ()
    recipients: tuple[Address, ...] = ()
    amounts: tuple[int, ...] = ()


@dataclass(frozen=True)
class PayAllSui:
    coins: tuple[ObjectRef, ...]
    recipient: Address


@dataclass(frozen=True)
class ChangeEpoch:
    epoch: Any
    storage_charge: int
    computation_charge: int

    def __post_init__(self) -> None:
        _freeze_fields(self, "epoch")


TransactionPayload = Union[
    TransferObject,
    ModulePublish,
    MoveCall,
    TransferSui,
    Pay,
    PaySui,
    PayAllSui,
    ChangeEpoch,
]


class TransactionKindTag(str, Enum):
    """Variant names, as used for the JSON keys."""

    TRANSFER_OBJECT = "TransferObject"
    PUBLISH = "Publish"
    CALL = "Call"
    TRANSFER_SUI = "TransferSui"
    CHANGE_EPOCH = "ChangeEpoch"
    PAY_SUI = "PaySui"
    PAY = "Pay"
    PAY_ALL_SUI = "PayAllSui"


PAYLOAD_TYPES: dict[TransactionKindTag, type] = {
    TransactionKindTag.TRANSFER_OBJECT: TransferObject,
    TransactionKindTag.PUBLISH: ModulePublish,
    TransactionKindTag.CALL: MoveCall,
    TransactionKindTag.TRANSFER_SUI: TransferSui,
    TransactionKindTag.CHANGE_EPOCH: ChangeEpoch,
    TransactionKindTag.PAY_SUI: PaySui,
    TransactionKindTag.PAY: Pay,
    TransactionKindTag.PAY_ALL_SUI: PayAllSui,
}

_TAG_BY_TYPE = {payload_type: tag for tag, payload_type in PAYLOAD_TYPES.items()}


@dataclass(frozen=True)
class SingleTransactionKind:
    """Exactly one transaction operation; the tag follows the payload type."""

    payload: TransactionPayload

    def __post_init__(self) -> None:
        if type(self.payload) not in _TAG_BY_TYPE:
            raise TypeError(
                f"Unsupported transaction payload: {type(self.payload).__name__}"
            )

    @property
    def tag(self) -> TransactionKindTag:
        return _TAG_BY_TYPE[type(self.payload)]


@dataclass(frozen=True)
class SenderSignedData:
    """Transaction data as it is signed and submitted."""

    transactions: tuple[SingleTransactionKind, ...] = ()
    sender: Address | None = None
    gas_payment: ObjectRef | None = None
    gas_budget: int = 0


@dataclass(frozen=True)
class TransactionBytes:
    """Response of the transaction-building RPC methods."""

    gas: tuple[ObjectRef, ...]
    input_objects: tuple[JsonObject, ...]
    tx_bytes: Base64Data

    def __post_init__(self) -> None:
        _freeze_fields(self, "input_objects")
