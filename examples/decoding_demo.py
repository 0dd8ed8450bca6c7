# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Decoding Demo: Validate JSON Payloads and Explain Failures.

This demo builds decoders for a small order payload, including a tagged
union for the payment method, and shows the messages produced when a
payload does not match.

Run with:
    python examples/decoding_demo.py
"""

import json

import decodekit as Decode
from decodekit import format_failure

CARD = Decode.object({
    "type": Decode.required("type", Decode.str),
    "last4": Decode.required("last4", Decode.str),
})

INVOICE = Decode.object({
    "type": Decode.required("type", Decode.str),
    "due_days": Decode.withDefault(30, Decode.optional("due_days", Decode.number)),
})

PAYMENT = Decode.dependent(
    Decode.required("type", Decode.enumeration(str, ["card", "invoice"])),
    lambda kind: CARD if kind == "card" else INVOICE,
    expectation="be a card or invoice payment",
)

ORDER = Decode.object({
    "id": Decode.required("id", Decode.number),
    "items": Decode.required("items", Decode.array(Decode.str)),
    "quantities": Decode.optional("quantities", Decode.dictionary(Decode.number)),
    "payment": Decode.required("payment", PAYMENT),
})


def show(title, raw):
    print("\n" + "=" * 70)
    print(title)
    print("=" * 70)
    result = Decode.try_decode(ORDER, json.loads(raw), name="order")
    if result.ok:
        print(f"✅ Decoded: {result.value}")
    else:
        print(f"❌ {result.error.message}")
        print(format_failure(result.error, label="order"))


def main():
    show("DEMO 1: A valid card order", """
        {"id": 1, "items": ["book"], "payment": {"type": "card", "last4": "4242"}}
    """)
    show("DEMO 2: Invoice without due_days gets the default", """
        {"id": 2, "items": ["pen"], "quantities": {"pen": 3}, "payment": {"type": "invoice"}}
    """)
    show("DEMO 3: Missing field inside the payment", """
        {"id": 3, "items": [], "payment": {"type": "card"}}
    """)
    show("DEMO 4: Unknown payment type", """
        {"id": 4, "items": [], "payment": {"type": "cash"}}
    """)


if __name__ == "__main__":
    main()
