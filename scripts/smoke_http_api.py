"""
Manual smoke runner for the POS billing Django adapter.

Walks a counter session against a server started with the demo seed
(BILLING_SEED_DEMO_DATA=1, the default):

    DJANGO_SETTINGS_MODULE=config.settings django-admin runserver --pythonpath .
    python scripts/smoke_http_api.py
    python scripts/smoke_http_api.py --base-url http://127.0.0.1:8000
"""

from __future__ import annotations

import argparse
import json
from urllib import error, request


def _call(
    *,
    method: str,
    url: str,
    body: dict | None = None,
) -> tuple[int, dict]:
    encoded = None
    headers = {}
    if body is not None:
        encoded = json.dumps(body).encode("utf-8")
        headers["Content-Type"] = "application/json"

    req = request.Request(url=url, method=method, headers=headers, data=encoded)
    try:
        with request.urlopen(req) as response:
            status = response.status
            payload = json.loads(response.read().decode("utf-8"))
            return status, payload
    except error.HTTPError as exc:
        payload = json.loads(exc.read().decode("utf-8"))
        return exc.code, payload


def _print_case(label: str, status: int, payload: dict) -> None:
    print(f"\n[{label}] status={status}")
    print(json.dumps(payload, indent=2, sort_keys=True))


def run(base_url: str) -> None:
    api = base_url.rstrip("/") + "/v1"

    status, payload = _call(method="GET", url=f"{api}/items")
    _print_case("list-items", status, payload)

    status, payload = _call(
        method="POST",
        url=f"{api}/cart/add",
        body={"item_id": 1, "quantity": 2},
    )
    _print_case("add-to-cart", status, payload)

    status, payload = _call(
        method="POST",
        url=f"{api}/cart/add",
        body={"item_id": 2, "quantity": 99},
    )
    _print_case("add-insufficient-stock", status, payload)

    status, payload = _call(
        method="POST",
        url=f"{api}/customers",
        body={"name": "Tight Budget", "phone": "555-0000", "credit_limit": 100},
    )
    _print_case("register-customer", status, payload)
    low_credit_id = payload.get("data", {}).get("id")

    status, payload = _call(
        method="POST",
        url=f"{api}/checkout",
        body={"customer_id": low_credit_id, "payment_mode": "credit"},
    )
    _print_case("checkout-credit-rejected", status, payload)

    status, payload = _call(
        method="POST",
        url=f"{api}/checkout",
        body={"customer_id": 1, "payment_mode": "paid"},
    )
    _print_case("checkout-paid", status, payload)

    status, payload = _call(
        method="GET",
        url=f"{api}/transactions?payment_mode=credit",
    )
    _print_case("credit-history", status, payload)


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--base-url",
        default="http://127.0.0.1:8000",
        help="Server base URL.",
    )
    args = parser.parse_args()
    run(args.base_url)


if __name__ == "__main__":
    main()
