"""JSON boundary for the data models. Pure functions, no I/O.

``*_from_json`` / ``*_to_json`` convert between models and parsed JSON values
(dicts, lists, strings). ``decode_*`` / ``encode_*`` work on raw JSON text.

Two fields are polymorphic on the wire:

* an object owner is either a JSON string or a JSON object, with no tag;
  the first significant character decides which;
* a transaction kind is an object with one optional key per variant, of
  which exactly one must be set.
"""
from __future__ import annotations

import json
from typing import Any, Callable

from .errors import (
    DecodeError,
    EmptyUnionError,
    MultipleOrZeroVariantsError,
    UnrecognizedShapeError,
)
from .hexdata import Address, Base64Data, HexData, parse_big_int
from .models import (
    U64_MAX,
    ChangeEpoch,
    ModulePublish,
    MoveCall,
    MoveModule,
    ObjectOwner,
    ObjectOwnerInternal,
    ObjectRef,
    Pay,
    PayAllSui,
    PaySui,
    SenderSignedData,
    SharedOwner,
    SingleTransactionKind,
    TimeRange,
    TransactionBytes,
    TransactionKindTag,
    TransactionPayload,
    TransferObject,
    TransferSui,
    thaw_json,
)

_JSON_WHITESPACE = " \t\r\n"

# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------


def _loads(raw: bytes | str) -> Any:
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(f"Malformed JSON: {e}") from e


def _dumps(value: Any) -> bytes:
    return json.dumps(value, separators=(",", ":")).encode("utf-8")


def _object(value: Any, name: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise DecodeError(f"{name}: expected a JSON object, got {value!r}")
    return value


def _array(value: Any, name: str) -> list[Any]:
    # Go peers send nil slices as null
    if value is None:
        return []
    if not isinstance(value, list):
        raise DecodeError(f"{name}: expected a JSON array, got {value!r}")
    return value


def _field(record: dict[str, Any], key: str, name: str) -> Any:
    if key not in record:
        raise DecodeError(f"{name}: missing field '{key}'")
    return record[key]


def _string(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise DecodeError(f"{name}: expected a string, got {value!r}")
    return value


def _address(value: Any, name: str) -> HexData:
    return Address.from_hex(_string(value, name))


def _field_address(record: dict[str, Any], key: str, name: str) -> HexData:
    return _address(_field(record, key, name), f"{name}.{key}")


def _u64(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"{name}: expected an unsigned integer, got {value!r}")
    if not 0 <= value <= U64_MAX:
        raise DecodeError(f"{name}: {value} does not fit in u64")
    return value


def _u64_list(value: Any, name: str) -> tuple[int, ...]:
    return tuple(_u64(v, name) for v in _array(value, name))


def _address_list(value: Any, name: str) -> tuple[HexData, ...]:
    return tuple(_address(v, name) for v in _array(value, name))


def _object_ref_list(value: Any, name: str) -> tuple[ObjectRef, ...]:
    return tuple(object_ref_from_json(v) for v in _array(value, name))


# ---------------------------------------------------------------------------
# Plain records
# ---------------------------------------------------------------------------


def object_ref_from_json(value: Any) -> ObjectRef:
    record = _object(value, "ObjectRef")
    try:
        version = parse_big_int(_field(record, "version", "ObjectRef"))
    except DecodeError as e:
        raise DecodeError(f"ObjectRef.version: {e}") from e
    return ObjectRef(
        object_id=_field_address(record, "objectId", "ObjectRef"),
        version=version,
        digest=Base64Data.from_base64(
            _string(_field(record, "digest", "ObjectRef"), "ObjectRef.digest")
        ),
    )


def object_ref_to_json(ref: ObjectRef) -> dict[str, Any]:
    return {
        "objectId": str(ref.object_id),
        "version": ref.version,
        "digest": str(ref.digest),
    }


def move_module_from_json(value: Any) -> MoveModule:
    record = _object(value, "MoveModule")
    return MoveModule(
        package=_field_address(record, "package", "MoveModule"),
        module=_string(_field(record, "module", "MoveModule"), "MoveModule.module"),
    )


def move_module_to_json(module: MoveModule) -> dict[str, Any]:
    return {"package": str(module.package), "module": module.module}


def time_range_from_json(value: Any) -> TimeRange:
    record = _object(value, "TimeRange")
    start = _u64(_field(record, "startTime", "TimeRange"), "TimeRange.startTime")
    end = _u64(_field(record, "endTime", "TimeRange"), "TimeRange.endTime")
    if start > end:
        raise DecodeError(f"TimeRange: startTime {start} is after endTime {end}")
    return TimeRange(start_time=start, end_time=end)


def time_range_to_json(time_range: TimeRange) -> dict[str, Any]:
    return {"startTime": time_range.start_time, "endTime": time_range.end_time}


# ---------------------------------------------------------------------------
# Object owner (string | record)
# ---------------------------------------------------------------------------


def _owner_internal_from_json(record: dict[str, Any]) -> ObjectOwnerInternal:
    address_owner = record.get("AddressOwner")
    object_owner = record.get("ObjectOwner")
    shared = record.get("Shared")

    if address_owner is not None:
        address_owner = _address(address_owner, "Owner.AddressOwner")
    if object_owner is not None:
        object_owner = _address(object_owner, "Owner.ObjectOwner")
    if shared is not None:
        shared_record = _object(shared, "Owner.Shared")
        version = _field(shared_record, "initial_shared_version", "Owner.Shared")
        shared = SharedOwner(initial_shared_version=parse_big_int(version))

    return ObjectOwnerInternal(
        address_owner=address_owner, object_owner=object_owner, shared=shared
    )


def _owner_internal_to_json(internal: ObjectOwnerInternal) -> dict[str, Any]:
    out: dict[str, Any] = {}
    if internal.address_owner is not None:
        out["AddressOwner"] = str(internal.address_owner)
    if internal.object_owner is not None:
        out["ObjectOwner"] = str(internal.object_owner)
    if internal.shared is not None:
        out["Shared"] = {
            "initial_shared_version": internal.shared.initial_shared_version
        }
    return out


def object_owner_from_json(value: Any) -> ObjectOwner:
    """Build an owner from an already parsed JSON value."""
    if isinstance(value, str):
        return ObjectOwner.from_string(value)
    if isinstance(value, dict):
        return ObjectOwner.from_internal(_owner_internal_from_json(value))
    raise UnrecognizedShapeError(
        f"Owner must be a string or an object, got {type(value).__name__}"
    )


def object_owner_to_json(owner: ObjectOwner) -> str | dict[str, Any]:
    if owner.string is not None:
        return owner.string
    if owner.internal is not None:
        return _owner_internal_to_json(owner.internal)
    raise EmptyUnionError("ObjectOwner has neither a string nor a record set")


def decode_object_owner(raw: bytes | str) -> ObjectOwner:
    """Decode raw owner JSON, choosing the arm from the first character.

    Raises:
        UnrecognizedShapeError: the payload is neither a string nor an object.
        DecodeError: the payload is malformed JSON.
    """
    if isinstance(raw, (bytes, bytearray)):
        head = bytes(raw).lstrip(_JSON_WHITESPACE.encode("ascii"))[:1]
        head_char = head.decode("ascii", errors="replace")
    else:
        head_char = raw.lstrip(_JSON_WHITESPACE)[:1]

    if head_char == '"':
        return ObjectOwner.from_string(_string(_loads(raw), "Owner"))
    if head_char == "{":
        return ObjectOwner.from_internal(_owner_internal_from_json(_loads(raw)))
    raise UnrecognizedShapeError(
        f"Owner payload must start with '\"' or '{{', got {head_char!r}"
    )


def encode_object_owner(owner: ObjectOwner) -> bytes:
    return _dumps(object_owner_to_json(owner))


# ---------------------------------------------------------------------------
# Transaction payloads
# ---------------------------------------------------------------------------


def _transfer_object_from_json(record: dict[str, Any]) -> TransferObject:
    return TransferObject(
        recipient=_field_address(record, "recipient", "TransferObject"),
        object_ref=object_ref_from_json(_field(record, "object_ref", "TransferObject")),
    )


def _publish_from_json(record: dict[str, Any]) -> ModulePublish:
    modules = _array(_field(record, "modules", "Publish"), "Publish.modules")
    return ModulePublish(
        modules=tuple(
            Base64Data.from_base64(_string(m, "Publish.modules")) for m in modules
        )
    )


def _call_from_json(record: dict[str, Any]) -> MoveCall:
    return MoveCall(
        package=_field_address(record, "package", "Call"),
        module=_string(_field(record, "module", "Call"), "Call.module"),
        function=_string(_field(record, "function", "Call"), "Call.function"),
        type_arguments=tuple(
            _array(record.get("typeArguments", []), "Call.typeArguments")
        ),
        arguments=tuple(_array(record.get("arguments", []), "Call.arguments")),
    )


def _transfer_sui_from_json(record: dict[str, Any]) -> TransferSui:
    return TransferSui(
        recipient=_field_address(record, "recipient", "TransferSui"),
        amount=_u64(_field(record, "amount", "TransferSui"), "TransferSui.amount"),
    )


def _pay_fields(record: dict[str, Any], name: str) -> dict[str, Any]:
    return {
        "coins": _object_ref_list(_field(record, "coins", name), f"{name}.coins"),
        "recipients": _address_list(
            _field(record, "recipients", name), f"{name}.recipients"
        ),
        "amounts": _u64_list(_field(record, "amounts", name), f"{name}.amounts"),
    }


def _pay_from_json(record: dict[str, Any]) -> Pay:
    return Pay(**_pay_fields(record, "Pay"))


def _pay_sui_from_json(record: dict[str, Any]) -> PaySui:
    return PaySui(**_pay_fields(record, "PaySui"))


def _pay_all_sui_from_json(record: dict[str, Any]) -> PayAllSui:
    return PayAllSui(
        coins=_object_ref_list(_field(record, "coins", "PayAllSui"), "PayAllSui.coins"),
        recipient=_field_address(record, "recipient", "PayAllSui"),
    )


def _change_epoch_from_json(record: dict[str, Any]) -> ChangeEpoch:
    return ChangeEpoch(
        epoch=_field(record, "epoch", "ChangeEpoch"),
        storage_charge=_u64(
            _field(record, "storage_charge", "ChangeEpoch"),
            "ChangeEpoch.storage_charge",
        ),
        computation_charge=_u64(
            _field(record, "computation_charge", "ChangeEpoch"),
            "ChangeEpoch.computation_charge",
        ),
    )


_PayloadDecoder = Callable[[dict[str, Any]], TransactionPayload]

_PAYLOAD_DECODERS: dict[TransactionKindTag, _PayloadDecoder] = {
    TransactionKindTag.TRANSFER_OBJECT: _transfer_object_from_json,
    TransactionKindTag.PUBLISH: _publish_from_json,
    TransactionKindTag.CALL: _call_from_json,
    TransactionKindTag.TRANSFER_SUI: _transfer_sui_from_json,
    TransactionKindTag.CHANGE_EPOCH: _change_epoch_from_json,
    TransactionKindTag.PAY_SUI: _pay_sui_from_json,
    TransactionKindTag.PAY: _pay_from_json,
    TransactionKindTag.PAY_ALL_SUI: _pay_all_sui_from_json,
}


def _payload_to_json(payload: TransactionPayload) -> dict[str, Any]:
    if isinstance(payload, TransferObject):
        return {
            "recipient": str(payload.recipient),
            "object_ref": object_ref_to_json(payload.object_ref),
        }
    if isinstance(payload, ModulePublish):
        return {"modules": [str(m) for m in payload.modules]}
    if isinstance(payload, MoveCall):
        return {
            "package": str(payload.package),
            "module": payload.module,
            "function": payload.function,
            "typeArguments": thaw_json(payload.type_arguments),
            "arguments": thaw_json(payload.arguments),
        }
    if isinstance(payload, TransferSui):
        return {"recipient": str(payload.recipient), "amount": payload.amount}
    if isinstance(payload, (Pay, PaySui)):
        return {
            "coins": [object_ref_to_json(c) for c in payload.coins],
            "recipients": [str(r) for r in payload.recipients],
            "amounts": list(payload.amounts),
        }
    if isinstance(payload, PayAllSui):
        return {
            "coins": [object_ref_to_json(c) for c in payload.coins],
            "recipient": str(payload.recipient),
        }
    if isinstance(payload, ChangeEpoch):
        return {
            "epoch": thaw_json(payload.epoch),
            "storage_charge": payload.storage_charge,
            "computation_charge": payload.computation_charge,
        }
    raise TypeError(f"Unsupported transaction payload: {type(payload).__name__}")


def transaction_kind_from_json(value: Any) -> SingleTransactionKind:
    """Build a transaction kind from its sparse JSON record.

    Unknown keys are ignored and ``null`` counts as absent.

    Raises:
        MultipleOrZeroVariantsError: not exactly one variant key is set.
    """
    record = _object(value, "TransactionKind")
    populated = [tag for tag in TransactionKindTag if record.get(tag.value) is not None]
    if len(populated) != 1:
        raise MultipleOrZeroVariantsError([tag.value for tag in populated])

    tag = populated[0]
    body = _object(record[tag.value], tag.value)
    return SingleTransactionKind(_PAYLOAD_DECODERS[tag](body))


def transaction_kind_to_json(kind: SingleTransactionKind) -> dict[str, Any]:
    return {kind.tag.value: _payload_to_json(kind.payload)}


def decode_transaction_kind(raw: bytes | str) -> SingleTransactionKind:
    return transaction_kind_from_json(_loads(raw))


def encode_transaction_kind(kind: SingleTransactionKind) -> bytes:
    return _dumps(transaction_kind_to_json(kind))


# ---------------------------------------------------------------------------
# Envelopes
# ---------------------------------------------------------------------------


def sender_signed_data_from_json(value: Any) -> SenderSignedData:
    record = _object(value, "SenderSignedData")
    sender = record.get("sender")
    gas_payment = record.get("gasPayment")
    return SenderSignedData(
        transactions=tuple(
            transaction_kind_from_json(t)
            for t in _array(record.get("transactions"), "transactions")
        ),
        sender=None if sender is None else _address(sender, "sender"),
        gas_payment=None if gas_payment is None else object_ref_from_json(gas_payment),
        gas_budget=_u64(record.get("gasBudget", 0), "gasBudget"),
    )


def sender_signed_data_to_json(data: SenderSignedData) -> dict[str, Any]:
    out: dict[str, Any] = {}
    if data.transactions:
        out["transactions"] = [transaction_kind_to_json(t) for t in data.transactions]
    out["sender"] = None if data.sender is None else str(data.sender)
    out["gasPayment"] = (
        None if data.gas_payment is None else object_ref_to_json(data.gas_payment)
    )
    out["gasBudget"] = data.gas_budget
    return out


def transaction_bytes_from_json(value: Any) -> TransactionBytes:
    record = _object(value, "TransactionBytes")
    input_objects = _array(
        _field(record, "inputObjects", "TransactionBytes"), "inputObjects"
    )
    return TransactionBytes(
        gas=_object_ref_list(_field(record, "gas", "TransactionBytes"), "gas"),
        input_objects=tuple(_object(o, "inputObjects") for o in input_objects),
        tx_bytes=Base64Data.from_base64(
            _string(_field(record, "txBytes", "TransactionBytes"), "txBytes")
        ),
    )


def transaction_bytes_to_json(tx: TransactionBytes) -> dict[str, Any]:
    return {
        "gas": [object_ref_to_json(g) for g in tx.gas],
        "inputObjects": thaw_json(tx.input_objects),
        "txBytes": str(tx.tx_bytes),
    }
