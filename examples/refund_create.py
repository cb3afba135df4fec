from __future__ import annotations
import argparse
from _common import add_common_args, make_client_from_args, pretty, print_error
from asaas.errors import AsaasHTTPError

def main():
    ap = argparse.ArgumentParser(description="Refund a charge (full or partial)")
    add_common_args(ap)
    ap.add_argument("--charge-id", required=True, help="Charge id (pay_...)")
    ap.add_argument("--value", default=None, help="Partial amount in BRL (omit for full refund)")
    ap.add_argument("--description", default=None, help="Optional reason")
    args = ap.parse_args()

    client = make_client_from_args(args)
    try:
        try:
            ch = client.charges.refund(args.charge_id, value=args.value, description=args.description)
            print(pretty(ch.model_dump(mode="json", by_alias=True)))
        except AsaasHTTPError as e:
            print_error("REFUND", e)
    finally:
        client.close()

if __name__ == "__main__":
    main()
