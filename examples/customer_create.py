from __future__ import annotations
import argparse
from _common import add_common_args, make_client_from_args, pretty, print_error
from asaas.errors import AsaasHTTPError

def main():
    ap = argparse.ArgumentParser(description="Create a customer (or reuse one with the same CPF/CNPJ)")
    add_common_args(ap)
    ap.add_argument("--name", required=True, help="Customer name")
    ap.add_argument("--cpf-cnpj", required=True, help="CPF or CNPJ (digits or formatted)")
    ap.add_argument("--email", default=None, help="Optional e-mail")
    ap.add_argument("--external-reference", default=None, help="Your own id for this customer")
    args = ap.parse_args()

    client = make_client_from_args(args)
    try:
        try:
            existing = client.customers.find_by_cpf_cnpj(args.cpf_cnpj)
            if existing:
                print("[CUSTOMER] already exists")
                print(pretty(existing.model_dump(mode="json", by_alias=True)))
                return
            fields = {"name": args.name, "cpf_cnpj": args.cpf_cnpj}
            if args.email:
                fields["email"] = args.email
            if args.external_reference:
                fields["external_reference"] = args.external_reference
            customer = client.customers.create(**fields)
            print(pretty(customer.model_dump(mode="json", by_alias=True)))
        except AsaasHTTPError as e:
            print_error("CUSTOMER", e)
    finally:
        client.close()

if __name__ == "__main__":
    main()
