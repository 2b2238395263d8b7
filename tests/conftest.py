"""Shared test fixtures and sample data."""
from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from sui_types.hexdata import Address, Base64Data
from sui_types.models import ObjectRef

# ---------------------------------------------------------------------------
# Identifier fixtures
# ---------------------------------------------------------------------------

SENDER_HEX = "0x" + "ab" * 32
RECIPIENT_HEX = "0x" + "00" * 12 + "cd" * 20
COIN_ID_HEX = "0x" + "11" * 32
DIGEST_B64 = "A7Wc3Yk+Q9NQxGiVBrJ4WsGX0Cbv0qpMQZnKBKQz3H0="


@pytest.fixture()
def sender() -> Address:
    return Address.from_hex(SENDER_HEX)


@pytest.fixture()
def recipient() -> Address:
    return Address.from_hex(RECIPIENT_HEX)


@pytest.fixture()
def sample_object_ref() -> ObjectRef:
    return ObjectRef(
        object_id=Address.from_hex(COIN_ID_HEX),
        version=7,
        digest=Base64Data.from_base64(DIGEST_B64),
    )


# ---------------------------------------------------------------------------
# Sample RPC payloads
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_object_ref_json() -> dict:
    return {"objectId": COIN_ID_HEX, "version": 7, "digest": DIGEST_B64}


@pytest.fixture()
def sample_transfer_sui_json() -> dict:
    return {"TransferSui": {"recipient": RECIPIENT_HEX, "amount": 1000}}


@pytest.fixture()
def sample_pay_sui_json(sample_object_ref_json: dict) -> dict:
    return {
        "PaySui": {
            "coins": [sample_object_ref_json],
            "recipients": [RECIPIENT_HEX, SENDER_HEX],
            "amounts": [10, 20],
        }
    }


@pytest.fixture()
def sample_signed_data_json(
    sample_object_ref_json: dict, sample_transfer_sui_json: dict
) -> dict:
    return {
        "transactions": [sample_transfer_sui_json],
        "sender": SENDER_HEX,
        "gasPayment": sample_object_ref_json,
        "gasBudget": 10000,
    }


# ---------------------------------------------------------------------------
# Config YAML fixture
# ---------------------------------------------------------------------------

SAMPLE_YAML = textwrap.dedent("""\
    coin_type: "0x2::sui::SUI"
    default_network: testnet
    networks:
      devnet:
        rpc_url: "https://rpc.devnet.example.com"
      testnet:
        rpc_url: "https://rpc.testnet.example.com"
""")


@pytest.fixture()
def sample_yaml_path(tmp_path: Path) -> Path:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(SAMPLE_YAML)
    return cfg_file
