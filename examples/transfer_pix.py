from __future__ import annotations
import argparse
from _common import add_common_args, make_client_from_args, pretty, print_error
from asaas.errors import AsaasHTTPError

def main():
    ap = argparse.ArgumentParser(description="Send a PIX transfer from the account balance")
    add_common_args(ap)
    ap.add_argument("--value", required=True, help="Amount in BRL")
    ap.add_argument("--key", required=True, help="Destination PIX key")
    ap.add_argument("--key-type", required=True, choices=["CPF", "CNPJ", "EMAIL", "PHONE", "EVP"])
    ap.add_argument("--description", default=None)
    args = ap.parse_args()

    client = make_client_from_args(args)
    try:
        try:
            balance = client.finance.balance()
            print(f"[TRANSFER] balance before: {balance.balance}")
            tr = client.transfers.create_pix(
                value=args.value,
                pix_address_key=args.key,
                pix_address_key_type=args.key_type,
                description=args.description,
            )
            print(pretty(tr.model_dump(mode="json", by_alias=True)))
        except AsaasHTTPError as e:
            print_error("TRANSFER", e)
    finally:
        client.close()

if __name__ == "__main__":
    main()
