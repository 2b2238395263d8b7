"""Sui JSON-RPC data types: identifiers, owners and transaction kinds."""
from .codec import (
    decode_object_owner,
    decode_transaction_kind,
    encode_object_owner,
    encode_transaction_kind,
    object_owner_from_json,
    object_owner_to_json,
    transaction_kind_from_json,
    transaction_kind_to_json,
)
from .config import DEVNET_RPC_URL, SUI_COIN_TYPE, TESTNET_RPC_URL, SdkConfig
from .errors import (
    DecodeError,
    EmptyUnionError,
    EncodeError,
    InvalidBase64Error,
    InvalidHexError,
    MultipleOrZeroVariantsError,
    SuiTypesError,
    TooLongError,
    UnrecognizedShapeError,
)
from .hexdata import (
    Address,
    Base64Data,
    Digest,
    HexData,
    ObjectId,
    TransactionDigest,
    is_same_string_address,
)
from .models import (
    ObjectOwner,
    ObjectOwnerInternal,
    ObjectRef,
    SenderSignedData,
    SingleTransactionKind,
    TransactionKindTag,
)

__all__ = [
    "Address",
    "Base64Data",
    "DEVNET_RPC_URL",
    "DecodeError",
    "Digest",
    "EmptyUnionError",
    "EncodeError",
    "HexData",
    "InvalidBase64Error",
    "InvalidHexError",
    "MultipleOrZeroVariantsError",
    "ObjectId",
    "ObjectOwner",
    "ObjectOwnerInternal",
    "ObjectRef",
    "SUI_COIN_TYPE",
    "SdkConfig",
    "SenderSignedData",
    "SingleTransactionKind",
    "SuiTypesError",
    "TESTNET_RPC_URL",
    "TooLongError",
    "TransactionDigest",
    "TransactionKindTag",
    "UnrecognizedShapeError",
    "decode_object_owner",
    "decode_transaction_kind",
    "encode_object_owner",
    "encode_transaction_kind",
    "is_same_string_address",
    "object_owner_from_json",
    "object_owner_to_json",
    "transaction_kind_from_json",
    "transaction_kind_to_json",
]
